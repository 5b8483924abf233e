from .auth import *
from .users import *
from .content import *
from .moderation import *
from .query import *
from .categories import *
