from catalog.common.exceptions import AppBaseException

class DomainLayerException(AppBaseException):
    '''Base for domain layer'''


### Input related
class ValidationError(DomainLayerException):
    '''Raised when input fields are missing or malformed. Carries every violation found, not just the first one'''
    def __init__(self, errors: list[str] | str):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__(', '.join(self.errors))


### Access related
class AccessException(DomainLayerException):
    '''Base for all exceptions related to access issues'''

class ActionNotAllowedForRole(AccessException):
    """Raised when action is not allowed for current user"""


### Lookup related
class NotFound(DomainLayerException):
    '''Base for "id does not resolve in the target collection" errors'''


### Model related
class ModelIntegrityError:
    '''Mixin for integrity violation exceptions. Keeps the underlying cause in `orig`'''
    def __init__(self, *args, orig: Exception|None = None):
        super().__init__(*args)
        self.orig = orig


####### Users

class BaseUserException(DomainLayerException):
    '''Base for user Exceptions'''

class UserDoesNotExist(BaseUserException, NotFound):
    '''Raised when user does not exist''' 

class UserIntegrityError(ModelIntegrityError, BaseUserException):
    '''Raised when user model integrity gets violated'''

class UserAlreadyExists(UserIntegrityError):
    '''Raised when user with such username/email already exists'''


####### Artworks

class ArtworkDoesNotExist(NotFound):
    '''Raised when there is no approved artwork with the given id'''


####### Submissions

class BaseSubmissionException(DomainLayerException):
    '''Base for submission Exceptions'''

class SubmissionDoesNotExist(BaseSubmissionException, NotFound):
    '''Raised when submission does not exist'''

class InvalidTransition(BaseSubmissionException):
    '''Raised when the requested moderation status change is not permitted'''


####### Categories

class BaseCategoryException(DomainLayerException):
    '''Base for category Exceptions'''

class CategoryDoesNotExist(BaseCategoryException, NotFound):
    '''Raised when category does not exist'''

class CategoryAlreadyExists(ModelIntegrityError, BaseCategoryException):
    '''Raised when a category with such name already exists'''
