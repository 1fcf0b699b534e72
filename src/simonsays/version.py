from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("simonsays")
    except PackageNotFoundError:
        # Fallback during source-checkout runs
        return "0.1.0"
