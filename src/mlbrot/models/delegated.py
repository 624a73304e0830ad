# -*- coding: utf-8 -*-
import logging
import threading

from mlbrot.models.classifier import Classifier


logger = logging.getLogger(__name__)

MEMBER_LABEL = "1"


class Delegated_classifier(Classifier):
    def __init__(self, predictor):
        """
        Delegates the membership test to an external predictor.

        Parameters
        ----------
        predictor: object
            Any object implementing `predict(re, im) -> str`. The label "1"
            means member of the set, any other label non-member.

        Notes
        -----
        A single attempt is made per point. If the predictor raises, the
        failure is logged and the point is classified as non-member: a
        remote failure never aborts the scan.
        """
        self.predictor = predictor
        self._n_failures = 0
        self._lock = threading.Lock()

    @property
    def n_failures(self):
        """ Number of points for which the predictor failed """
        return self._n_failures

    def classify(self, c):
        try:
            label = self.predictor.predict(c.real, c.imag)
        except Exception as exc:
            with self._lock:
                self._n_failures += 1
            logger.warning(
                f"Prediction failed for c = {c.real:f}{c.imag:+f}j, "
                f"classified as non-member: {exc!r}"
            )
            return False
        return label == MEMBER_LABEL

    def info_str(self):
        return (
            "Classifier: delegated to "
            f"{self.predictor.__class__.__name__}"
        )


class Aws_ml_predictor:
    def __init__(self, model_id, endpoint, region="us-east-1", client=None):
        """
        Real-time predictor served by Amazon Machine Learning.

        Parameters
        ----------
        model_id: str
            The ML model id
        endpoint: str
            The real-time prediction endpoint of the model
        region: str
            The AWS region of the endpoint
        client: optional
            A "machinelearning" boto3 client. If None, a client is created
            from the default AWS credentials chain.

        The model expects 2 string features "real" and "imag" (6 decimals)
        """
        self.model_id = model_id
        self.endpoint = endpoint
        self.region = region
        if client is None:
            import boto3
            client = boto3.client("machinelearning", region_name=region)
            logger.debug(f"Created machinelearning client for {region}")
        self.client = client

    def record(self, re, im):
        return {
            "real": f"{re:.6f}",
            "imag": f"{im:.6f}",
        }

    def predict(self, re, im):
        """ Returns the predicted label as a str """
        resp = self.client.predict(
            MLModelId=self.model_id,
            Record=self.record(re, im),
            PredictEndpoint=self.endpoint
        )
        return resp["Prediction"]["predictedLabel"]
