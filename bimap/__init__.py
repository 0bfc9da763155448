from .about import __version__
from .bidirectional_map import BidirectionalMap
from .utility.absent import ABSENT, Absent
from .utility.exceptions import AbsentMarkerError

assert isinstance(__version__, str)
assert isinstance(BidirectionalMap, type)
assert isinstance(Absent, type)
assert isinstance(AbsentMarkerError, type)
