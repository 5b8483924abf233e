from catalog.common.exceptions import AppBaseException

class CustomStorageException(AppBaseException):
    """Base for exceptions raised manually in storage services (record store, session caches)"""

class StorageFailure(CustomStorageException):
    '''Underlying write did not complete. The previous document is left intact'''

class CorruptedCollection(CustomStorageException):
    '''Collection document exists but cannot be decoded as a JSON array'''
