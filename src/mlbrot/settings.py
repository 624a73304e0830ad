# -*- coding: utf-8 -*-
"""
General settings at application-level
"""

enable_multithreading: bool = True
"""Turn on or off multithreading (for debugging purpose). If False, the
pixels are classified one after the other in the dispatching thread"""

concurrency_level: int = 20
"""Maximal number of classification tasks simultaneously in flight"""

max_lines_to_write: int = 0
"""Cap on the number of records written to the csv data file:

    - 0 (default): no data file is written
    - -1 (or any negative value): no limit
    - n > 0: at most n records
"""

coloring_method: str = "classic"
"""The coloring method: "classic" (escape-time test computed locally) or
"ml" (classification delegated to a remote predictor)"""

bailout_iteration: int = 30
"""Maximal number of iterations. A point which has not escaped after
`bailout_iteration` iterations is considered a member of the set"""

radius: float = 2.
"""Escape radius. The iteration stops as soon as abs(z) > radius"""

nx: int = 800
"""Number of pixels of the image along the x-axis (width)"""

ny: int = 800
"""Number of pixels of the image along the y-axis (height)"""

min_re: float = -2.
"""Real part of the left edge of the image"""

max_re: float = 1.
"""Real part of the right edge of the image"""

min_im: float = -1.2
"""Imaginary part of the bottom edge of the image. The top edge is derived
from the image aspect ratio"""

progress_interval: float = 1.
"""Time interval between 2 progress reports, in seconds"""

aws_model_id: str = "ml-Dce8rRsvJGR"
"""Amazon Machine Learning model used by the "ml" coloring method"""

aws_endpoint: str = "https://realtime.machinelearning.us-east-1.amazonaws.com"
"""Real-time prediction endpoint for `aws_model_id`"""

aws_region: str = "us-east-1"
"""AWS region of the prediction endpoint"""

verbosity: int = 1
"""
Controls the verbosity for the log messages:

    - 0: WARNING & higher severity, output to stderr
    - 1 (default): INFO & higher severity, output to stdout
    - 2:

        - INFO & higher severity, output to stdout
        - DEBUG & higher severity, output to a log file

    - 3 (highest verbosity):

        - INFO & higher severity, output to stdout
        - ALL message (incl. NOTSET), output to a log file

Note: Severities in descending order:
CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET """

log_directory: str = None
""" The logging directory for this session - as str"""
