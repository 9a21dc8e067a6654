"""
Module contains classes and methods for tracing program operation.

Trace output is written to standard error so that it never mixes with
exported text sent to standard output.
"""
from enum import IntEnum
import sys

class TraceLevel(IntEnum):
    DEBUG = 150
    DETAIL = 100
    ALL = 100
    RESULT = 80
    EVENT = 50
    READ = 25
    ECHO = 20
    NONE = 0

    @classmethod
    def fromMode(cls, mode):
        """ Return the TraceLevel named by a command-line mode string. """
        mode = str(mode).lower()
        out = _mode_levels.get(mode, None)
        if out is None:
            raise(ValueError("Unexpected trace mode, {}.".format(mode)))
        return out

_mode_levels = {    "silent"  : TraceLevel.NONE,
                    "echo"    : TraceLevel.ECHO,
                    "trace"   : TraceLevel.EVENT,
                    "verbose" : TraceLevel.ALL,
                    "debug"   : TraceLevel.DEBUG }

_indent_strings = { TraceLevel.NONE   : "{}",
                    TraceLevel.ECHO   : "ECHO   : {}",
                    TraceLevel.READ   : "READ   : {}",
                    TraceLevel.EVENT  : "EVENT  : {}",
                    TraceLevel.RESULT : "RESULT : {}",
                    TraceLevel.DETAIL : "DETAIL : {}",
                    TraceLevel.DEBUG  : "DEBUG  : {}" }

class TraceManager:
    """
    Class to manage trace output, depending on set level.

    Messages whose level is at or below the filter level are written
    to the trace stream (standard error unless another writable
    stream is given).
    """

    def __init__(self, level=TraceLevel.NONE, stream=None):
        self._filter = level
        self._stream = stream

    @property
    def filterLevel(self):
        return self._filter

    @filterLevel.setter
    def filterLevel(self, val):
        self._filter = TraceLevel(val)

    @property
    def stream(self):
        if self._stream is None:
            return sys.stderr
        return self._stream

    @stream.setter
    def stream(self, val):
        self._stream = val

    def passesFilter(self, filter_level):
        """
        Return True if a message at filter_level would be printed.
        """
        return filter_level <= self._filter

    def trace(self, message, level, *args):
        if self.passesFilter(level):
            if len(args) > 0:
                message = message.format(*args)
            formstr = _indent_strings.get(level,"OTHER  : {}")
            print(formstr.format(message), file=self.stream)

TRACER = TraceManager(TraceLevel.NONE)

def debug(caller_name, msg, *args):
    if TRACER.passesFilter(TraceLevel.DEBUG):
        msg = caller_name + ": " + msg
        TRACER.trace(msg, TraceLevel.DEBUG, *args)
