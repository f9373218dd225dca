from .channel import BlendingInformation, Channel
from .config import BlendingPresets
from .errors import MissingFieldError, ShapeError, ValidationError
from .version import __version__
