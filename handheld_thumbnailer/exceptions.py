class ThumbnailerException(Exception):
    '''Base class to extend in order to throw exception in handheld_thumbnailer.

    It takes a keyword argument that represents the chain of the fields that
    were unpacking when the exception happened (innermost first); every
    Chunk that sees the exception passing through appends its own field name.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    def _describe(self):
        return super().__str__()

    def __str__(self):
        msg = self._describe()
        if self.chain:
            msg = '%s (while unpacking %s)' % (msg, '.'.join(reversed(self.chain)))

        return msg


class MagicException(ThumbnailerException):
    '''The signature of a format doesn't correspond.'''

    def __init__(self, format_name=None, expected=None, found=None, **kwargs):
        self.format_name = format_name
        self.expected = expected
        self.found = found
        super().__init__(**kwargs)

    def _describe(self):
        return '%s magic not found: expected %r, found %r' % (
            self.format_name or 'format', self.expected, self.found)


class UnsupportedFeatureException(ThumbnailerException):
    '''The data is well formed but uses something we can't handle.'''

    def __init__(self, reason, value=None, **kwargs):
        self.reason = reason
        self.value = value
        super().__init__(**kwargs)

    def _describe(self):
        if self.value is None:
            return 'unsupported %s' % self.reason

        return 'unsupported %s: %s' % (self.reason, self.value)


class InvalidFieldException(ThumbnailerException):
    '''A field has a value outside of the ones allowed by the format.'''

    def __init__(self, field, value, **kwargs):
        self.field = field
        self.value = value
        super().__init__(**kwargs)

    def _describe(self):
        value = hex(self.value) if isinstance(self.value, int) else repr(self.value)
        return 'invalid value for field \'%s\': %s' % (self.field, value)


class ResourceNotFoundException(ThumbnailerException):

    def __init__(self, what, **kwargs):
        self.what = what
        super().__init__(**kwargs)

    def _describe(self):
        return '%s not found' % self.what


class IOFailureException(ThumbnailerException):
    '''Reading from or seeking into the underlying stream failed.'''

    def __init__(self, message, **kwargs):
        self.message = message
        super().__init__(message, **kwargs)
