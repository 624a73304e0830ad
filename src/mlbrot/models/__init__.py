# -*- coding: utf-8 -*-
from .classifier import Classifier, get_classifier
from .escape_time import Escape_time_classifier
from .delegated import Delegated_classifier, Aws_ml_predictor
