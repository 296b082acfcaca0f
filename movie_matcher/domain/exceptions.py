class DomainError(Exception):
    pass


class ConfigurationError(DomainError):
    pass


class EmbeddingError(DomainError):
    pass


class SimilaritySearchError(DomainError):
    pass


class CompletionError(DomainError):
    pass


class NoMatchFoundError(DomainError):
    pass
