from .users import *
from .artworks import *
from .submissions import *
from .categories import *
