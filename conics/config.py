import yaml
from munch import munchify, Munch
from paths import CONFIG_FILE


def load_config(path=None) -> Munch:
    path = CONFIG_FILE if path is None else path
    with open(path, 'r') as f:
        return munchify(yaml.safe_load(f))


cfg = load_config()
