class GppzError(Exception):
    pass


class NoActiveDocumentError(GppzError):
    pass


class NoSourcePathError(GppzError):
    pass


class UnknownLanguageError(GppzError):
    pass


class CompilerNotFoundError(GppzError):
    pass


class GitRepositoryNotFoundError(GppzError):
    pass


class WorkingDirectoryNotFoundError(GppzError):
    pass
