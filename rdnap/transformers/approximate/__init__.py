from rdnap.transformers.approximate.approximate import ApproximateTransformer

__all__ = ["ApproximateTransformer"]
