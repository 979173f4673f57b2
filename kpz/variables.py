from typing import Dict, Iterator


class VariableTable:
    """Values assigned with ``name = expr``, kept for the life of one parser.

    Names are case sensitive.
    """

    def __init__(self):
        self._values: Dict[str, float] = {}

    def assign(self, name: str, value: float) -> float:
        self._values[str(name)] = value
        return value

    def lookup(self, name: str) -> float:
        "Raises KeyError for a name that was never assigned"
        return self._values[str(name)]

    def __contains__(self, name):
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return 'VariableTable(%r)' % (self._values,)
