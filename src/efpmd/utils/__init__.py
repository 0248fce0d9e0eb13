from .script import *
