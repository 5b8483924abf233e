from datetime import datetime,date
from enum import Enum


####################
# Common utilities #
####################

def json_serializer(obj):
    #add conversions for non-serializable stuff here
    if isinstance(obj,(datetime,date)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"{type(obj)} is not serializable!")
