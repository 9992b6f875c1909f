from .maybe import Maybe, Some, Nothing, NONE, some, none, of_nullable
from .combinators import traverse, map_n, apply
from .logger import ConsoleLogger, default_logger, traced
