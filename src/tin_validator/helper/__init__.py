from .base import BaseTinHandler
from .exception import TinException
