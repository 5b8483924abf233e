from .json_store import *
from .seed import *
