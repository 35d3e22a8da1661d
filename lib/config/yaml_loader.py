"""Safe YAML loader."""
import yaml

from lib.utils.validation import ensure


def load_yaml(path: str) -> dict:
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    ensure(isinstance(data, dict), f"{path}: top level must be a mapping")
    return data
