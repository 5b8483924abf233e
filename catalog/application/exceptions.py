from catalog.common.exceptions import AppBaseException

class AuthBaseException(AppBaseException):
    '''Base for authentication and authorization failures'''

class CredentialsException(AuthBaseException):
    '''No user matches the given login/password pair'''

class AccountInactive(AuthBaseException):
    '''Credentials are valid but the account is not active'''

class NotAuthenticated(AuthBaseException):
    '''No valid session is attached to the request'''

class Forbidden(AuthBaseException):
    '''Session is valid but the role is insufficient'''
