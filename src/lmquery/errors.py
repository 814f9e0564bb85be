# src/lmquery/errors.py
# Failures that abort a run. Each maps to its own process exit code.


class LMQueryError(Exception):
    exit_code = 1


class InvalidArguments(LMQueryError):
    exit_code = 2


class ContextFileNotFound(LMQueryError):
    exit_code = 3


class ContextIsDirectory(LMQueryError):
    exit_code = 4


class UnsupportedExtension(LMQueryError):
    exit_code = 5


class ServerUnreachable(LMQueryError):
    exit_code = 6


class RequestFailed(LMQueryError):
    exit_code = 7


class ContextFileUnreadable(LMQueryError):
    exit_code = 8
