"""Error taxonomy for palette-engine.

Only ConfigurationError is fatal. DecodeFailure is caught at the per-image
boundary and the image simply contributes no colours. Empty signal (every
pixel discarded) and empty batches are not exceptions at all: they surface
as empty colour lists and fall back to the default result.
"""


class PaletteEngineError(Exception):
    """Base class for all palette-engine errors."""


class ConfigurationError(PaletteEngineError, ValueError):
    """Invalid engine configuration (e.g. a non-positive bucket size)."""


class DecodeFailure(PaletteEngineError):
    """An image could not be read, decoded or turned into a pixel buffer."""

    def __init__(self, source: str, reason: str):
        super().__init__(f'{source}: {reason}')
        self.source = source
        self.reason = reason
