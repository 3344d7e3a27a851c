class Sentinel:
	def __init__(self, name: str) -> None:
		self.name = name

	def __repr__(self) -> str:
		return self.name


# Value stored for every key of a HashSet's mapping. Only key existence matters.
PRESENT = Sentinel("PRESENT")

# Default for lookups where None is a legitimate result.
MISSING = Sentinel("MISSING")
