class AsciifyError(Exception):
    """Base class for everything asciify raises on purpose."""


class PreconditionError(AsciifyError, ValueError):
    """Conversion inputs that cannot produce a rendering (zero width, empty ramp, ...)."""


class ImageLoadError(AsciifyError):
    def __init__(self, source: str, message: str):
        super().__init__(f"{message}: {source}")
        self.source = source


class FetchError(ImageLoadError):
    """The image bytes could not be obtained (network failure, HTTP error, unreadable file)."""


class DecodeError(ImageLoadError):
    """The bytes were obtained but are not an image Pillow can decode."""
