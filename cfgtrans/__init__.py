# Configuration language -> JSON translator
__version__ = "0.1.0"

from .parser import (
    TranslationError, ParseError, ConfigSyntaxError, UnresolvedConstantError,
    UnexpectedTokenError, NumberLiteralError, DuplicateKeyError, NestingTooDeepError,
)
from .translator import Translator, translate
from .values import CfgValue, CfgType
