"""
This example demonstrates the basic usage of BidirectionalMap.

A BidirectionalMap is a one-to-one mapping: every key has exactly one value and every value has exactly one key, so
both can be used to look up the other in constant time.
"""

from bimap import ABSENT, BidirectionalMap


def main():
    # Pre-populate the map from (key, value) pairs, a dict works as well
    country_codes = BidirectionalMap([("France", "FR"), ("Germany", "DE")])

    # set() returns the map itself, so calls can be chained
    country_codes.set("Italy", "IT").set("Spain", "ES")

    assert country_codes.get("France") == "FR"
    assert country_codes.get_reverse("DE") == "Germany"

    # Lookups never raise, a missing key or value gives back the ABSENT marker, which is falsy and not None
    assert country_codes.get("Atlantis") is ABSENT
    assert not country_codes.has_reverse("XX")

    # Either side can be used to remove an entry
    assert country_codes.delete_reverse("IT")
    assert "Italy" not in country_codes

    for country, code in country_codes:
        print(f"{country}: {code}")

    print(country_codes.size)  # 3


if __name__ == "__main__":
    main()
