class HexdumpError(RuntimeError):
    """Base class for errors that stop a conversion."""

    def __init__(self, message):
        RuntimeError.__init__(self, message)


class MissingOutputPathError(HexdumpError):
    """Raised before any I/O when no output file was given."""

    def __init__(self):
        HexdumpError.__init__(self, "An output file is required (-o out_file)")


class FileOpenError(HexdumpError):
    """Raised when an input or output file cannot be opened."""

    def __init__(self, path, mode, reason=None):
        message = "Unable to open file %s for %s" % (path, mode)
        if reason:
            message += " (%s)" % reason
        HexdumpError.__init__(self, message)
        self.path = path
        self.mode = mode

    @staticmethod
    def from_os_error(path, mode, error):
        return FileOpenError(path, mode, getattr(error, "strerror", None) or str(error))
