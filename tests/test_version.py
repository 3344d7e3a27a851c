from importlib.metadata import PackageNotFoundError, version

from hashset import __version__


def test_version_matches_distribution_metadata():
	try:
		expected = version("hashset")
	except PackageNotFoundError:
		expected = "0.0.0"
	assert __version__ == expected
