"""
This module contains the parsers for EFP input files. The input is read line by line and turned into a
:obj:`efpmd.configuration.Configuration` for the simulation driver.
"""
from .errors import *
from .stream import *
from .scalars import *
from .options import *
from .fragments import *
from .input_parser import *
