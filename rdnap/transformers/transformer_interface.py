from abc import ABCMeta, abstractmethod
from typing import List

from rdnap.constructs.coordinate import GeodeticCoordinate, PlanarCoordinate
from rdnap.constructs.survey import Survey
from rdnap.transformers.transform_result import TransformResult


class TransformerInterface(metaclass=ABCMeta):
    """
    Abstract base class defining the interface for RD to ETRS89 transformations.

    Subclasses must implement the transform method for single coordinates; the
    survey and batch methods are built on top of it and may be overridden with
    faster implementations.

    Examples:
        >>> from rdnap.transformers.approximate import ApproximateTransformer
        >>>
        >>> transformer = ApproximateTransformer()
        >>> result = transformer.transform_survey(survey)
    """

    @abstractmethod
    def transform(self, coord: PlanarCoordinate) -> GeodeticCoordinate:
        """
        Transform a single RD coordinate to ETRS89.

        Args:
            coord: The RD coordinate (kilometers) and height above NAP (meters)

        Returns:
            The ETRS89 latitude, longitude (degrees) and ellipsoidal height (meters),
            carrying the coordinate_id of the input

        Raises:
            InvalidArgument: If the coordinate lies outside the supported domain
        """

    def transform_survey(self, survey: Survey) -> TransformResult:
        """
        Transform every point of a survey.

        Args:
            survey: The RD points to transform

        Returns:
            A TransformResult with one GeodeticCoordinate per point, in survey order
        """
        return TransformResult([self.transform(c) for c in survey.coords])

    def transform_batch(self, survey_batch: List[Survey]) -> List[TransformResult]:
        return [self.transform_survey(s) for s in survey_batch]
