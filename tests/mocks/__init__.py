from .hasher import *
from .traces import *
