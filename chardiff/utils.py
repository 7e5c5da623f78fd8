import math


class SimilarityCalculator:
    """
    Static helpers turning edit distances into similarity scores.
    """

    @staticmethod
    def levenshtein_ratio(edit_distance: int, len1: int, len2: int) -> float:
        """
        Levenshtein ratio (0.0 to 1.0): 1 - distance / longest length.
        Floored at 0.0, and 1.0 when both lengths are zero.
        """
        longest = max(len1, len2)
        if longest == 0:
            return 1.0
        return max(0.0, 1.0 - (edit_distance / longest))

    @staticmethod
    def round_percent(value: float) -> float:
        """
        Rounds a non-negative percentage to two decimals, ties away from zero.
        """
        return math.floor(value * 100 + 0.5) / 100

    @staticmethod
    def similarity_percent(text1: str, text2: str, edit_distance: int) -> float:
        """
        Similarity of two normalized texts as a percentage with two decimals.

        Lengths are counted in code points even when the distance was
        computed over words or lines.
        """
        ratio = SimilarityCalculator.levenshtein_ratio(edit_distance, len(text1), len(text2))
        return SimilarityCalculator.round_percent(ratio * 100)
