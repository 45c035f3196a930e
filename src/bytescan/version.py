from importlib.metadata import PackageNotFoundError, version

try:
    version = version("ByteScan")
except PackageNotFoundError:
    version = "0.0.0"
