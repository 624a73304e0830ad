# -*- coding: utf-8 -*-
__license__ = "MIT"
__version__ = "1.0.0"

from . import settings
from . import utils
from .projection import Plane_grid, pixel_to_plane
from .canvas import (
    Canvas, MEMBER_COLOR, NON_MEMBER_COLOR, BACKGROUND_COLOR, verdict_color
)
from .datalog import Result_log
from .progress import Progress_counter, Progress_reporter
from .mthreading import Bounded_scheduler
from .core import Renderer, run, default_grid
from .log import set_log_handlers
