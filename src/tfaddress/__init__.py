"""
Parse Terraform resource addresses such as `module.vpc[0].data.aws_ami.ubuntu` and render them back to their
canonical string form.
"""

__version__ = "0.1.0"

from ._address import Address, Module, ModulePath, ResourceMode, ResourceSpec
from ._index import ABSENT, AbsentIndex, Index, IntegerIndex, TextIndex, quote
from ._parser import ParseError, TrailingInput, UnexpectedEnd, UnexpectedToken, parse_address
from ._renderable import Renderable

__all__ = [
    # _address
    "Address",
    "Module",
    "ModulePath",
    "ResourceMode",
    "ResourceSpec",
    # _index
    "ABSENT",
    "AbsentIndex",
    "Index",
    "IntegerIndex",
    "TextIndex",
    "quote",
    # _parser
    "parse_address",
    "ParseError",
    "TrailingInput",
    "UnexpectedEnd",
    "UnexpectedToken",
    # _renderable
    "Renderable",
]
