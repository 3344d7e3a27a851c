from .dedupe import first_repeated, unique
from .env import Env, env
from .hash_set import HashSet
from .helpers import MISSING, PRESENT, Sentinel
from .version import __version__

__all__ = [
	"Env",
	"HashSet",
	"MISSING",
	"PRESENT",
	"Sentinel",
	"__version__",
	"env",
	"first_repeated",
	"unique",
]
