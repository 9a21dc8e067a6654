"""
Exceptions raised while exporting space group data.
"""

class SymmetryCadError(Exception):
    """ Base class for all errors raised by symmetryCadGen.
    
    Attributes
    ----------
    message : str
        Explanation of the error.
    """
    
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)

class UsageError(SymmetryCadError):
    """ Raised when the command line is missing or misuses an argument. """
    pass

class DataSourceError(SymmetryCadError):
    """ Raised when the space group reference table can not be read.
    
    Attributes
    ----------
    source : 
        The table (file path or library name) that failed.
    message : str
        Explanation of the error.
    """
    
    def __init__(self, source, message=None):
        if message is None:
            message = "Unable to read space group table from {}.".format(source)
        self.source = source
        super().__init__(message)

class DuplicateTokenError(SymmetryCadError):
    """ Raised when two space groups normalize to the same name token.
    
    Attributes
    ----------
    tokens : list of str
        The tokens appearing more than once, in order of first repeat.
    message : str
        Explanation of the error.
    """
    
    def __init__(self, tokens, message=None):
        self.tokens = list(tokens)
        if message is None:
            message = "Duplicate space group token(s): {}".format(", ".join(self.tokens))
        super().__init__(message)

class FormatError(SymmetryCadError):
    """ Raised when data can not be rendered into the output format. """
    pass
