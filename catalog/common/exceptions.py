import traceback

def format_exception_string(e: Exception,source:str = "APP", comment: str = ""): #For loggers
    return f'[{source}: Exception] {comment}\n\nTraceback:\n{"".join(traceback.format_exception(e))}'

class AppBaseException(Exception):
    """Global base exception"""
    pass
