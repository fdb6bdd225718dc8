"""Statistical tests for the randomness of bit sequences after NIST SP 800-22."""

__version__ = "0.1.0"

__all__ = [
    "result",
    "bitvec",
    "block_patterns",
    "binary_matrix_rank",
    "linear_complexity",
    "random_excursions_variant",
]