"""Domain exception hierarchy."""


class DocsetException(Exception):
    pass


class StubGenerationException(DocsetException):
    pass


class InputDiscoveryException(DocsetException):
    pass


class RendererException(DocsetException):
    pass
