# -*- coding: utf-8 -*-
import mlbrot as mb
import mlbrot.settings


COLORING_METHODS = ("classic", "ml")


class Classifier:
    """
    Base class for the set-membership tests.

    Derived classes shall implement `classify`. Implementations are called
    concurrently from the worker threads and shall not hold mutable state
    without their own locking.
    """

    def classify(self, c):
        """
        Parameters
        ----------
        c: complex
            The point of the complex plane to test

        Returns
        -------
        verdict: bool
            True if c belongs to the set
        """
        raise NotImplementedError("Derived classes shall implement")

    def info_str(self):
        return f"Classifier: {self.__class__.__name__}"


def get_classifier(method, predictor=None):
    """
    Returns the classifier for a coloring method.

    Parameters
    ----------
    method: "classic" | "ml"
        "classic" uses the local escape-time test with the iteration
        parameters from `mlbrot.settings` ; "ml" delegates to `predictor`
    predictor: object with a `predict(re, im)` method
        The remote predictor for the "ml" method. If None, an
        `Aws_ml_predictor` is built from `mlbrot.settings`.
    """
    from mlbrot.models.escape_time import Escape_time_classifier
    from mlbrot.models.delegated import Delegated_classifier, Aws_ml_predictor

    if method == "classic":
        return Escape_time_classifier(
            max_iter=mb.settings.bailout_iteration,
            radius=mb.settings.radius
        )
    if method == "ml":
        if predictor is None:
            predictor = Aws_ml_predictor(
                model_id=mb.settings.aws_model_id,
                endpoint=mb.settings.aws_endpoint,
                region=mb.settings.aws_region
            )
        return Delegated_classifier(predictor)
    raise ValueError(
        f"Unknown coloring method: {method}, expected one of "
        f"{COLORING_METHODS}"
    )
