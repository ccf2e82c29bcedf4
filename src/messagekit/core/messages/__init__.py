# flake8: noqa
from .messages import MessageCatalog, resolve
from .interpolate import interpolate
from .types import Messages, Scalar, Variables
