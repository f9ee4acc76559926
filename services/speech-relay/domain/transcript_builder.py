"""Core business logic for transcript building."""

from .models import RecognitionResult


class TranscriptBuilder:
    """Builds a flat transcript from batch recognition results."""

    def build(self, results: list[RecognitionResult]) -> str:
        """
        Joins the top alternative of every result, in engine order.

        Results without alternatives are skipped.
        """
        return " ".join(
            result.alternatives[0].transcript
            for result in results
            if result.alternatives
        )

    def confidence(self, results: list[RecognitionResult]) -> float | None:
        """Mean confidence of the top alternatives, or None if nothing was heard."""
        scores = [
            result.alternatives[0].confidence
            for result in results
            if result.alternatives
        ]
        if not scores:
            return None
        return sum(scores) / len(scores)
