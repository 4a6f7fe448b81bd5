from typing import Type
from conics import conic_kinds
from conics.api.conics_api import conic_api
from conics.api.ellipse_api import ellipse_api, circle_api
from conics.api.hyperbola_api import hyperbola_api
from conics.api.parabola_api import parabola_api
from conics.api.degenerate_api import point_api, intersecting_lines_api, parallel_lines_api, \
    coincident_lines_api, imaginary_api, undefined_api

_apis = {api.kind(): api for api in (ellipse_api, circle_api, hyperbola_api, parabola_api, point_api,
                                     intersecting_lines_api, parallel_lines_api, coincident_lines_api,
                                     imaginary_api, undefined_api)}


def get_conic_api(kind: str) -> Type[conic_api]:
    try:
        return _apis[kind]
    except KeyError:
        raise ValueError('Unknown conic kind ' + str(kind))
