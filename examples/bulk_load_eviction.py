"""
This example shows how BidirectionalMap keeps keys and values unique when pairs collide.

Setting a pair whose key or value is already in use silently evicts the stale entries. When the key and the value
collide with two different entries, both entries are evicted and replaced by the new one, so the map shrinks.
The same rule applies while loading pairs in the constructor.
"""

from bimap import ABSENT, BidirectionalMap
from bimap.utility.logging.utility import setup_logger


def main():
    # evictions are logged at debug level
    setup_logger(logging_level="DEBUG")

    ports = BidirectionalMap()
    ports.set("http", 80).set("https", 443)

    # "http" already maps to 80 and 443 already belongs to "https", both entries go away
    ports.set("http", 443)

    assert ports.size == 1
    assert ports.get("http") == 443
    assert ports.get("https") is ABSENT
    assert ports.get_reverse(80) is ABSENT

    # Loading pairs in bulk behaves exactly like calling set() for each pair in order
    services = BidirectionalMap([("ssh", 22), ("http", 80), ("https", 443), ("http", 443)])
    assert list(services) == [("ssh", 22), ("http", 443)]

    print(services)


if __name__ == "__main__":
    main()
