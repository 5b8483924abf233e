from .base import *
from .users import *
from .artworks import *
from .submissions import *
from .categories import *
from .sessions import *
