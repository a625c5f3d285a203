from .compiler import compile_regex, match, describe, explain
from .parser import parse
from .runner import Config, SearchStrategy, evaluate, search
from .exceptions import *
