import logging
from . config import cfg, load_config
from . conic_errors import ConicError, SingularSystemError, ConicTypeError, NotCanonicalizedError, InvalidConicError
from . import conic_coeffs, conic_kinds
from . conic import Conic

logging.getLogger(__name__).setLevel(cfg.logging.level)
