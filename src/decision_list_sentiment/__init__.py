"""Decision-List Sentiment -- Yarowsky-style decision lists for binary text classification."""

__version__ = "0.1.0"

from .classifier import DecisionListClassifier
from .config import DEFAULT_CONFIG, STOP_TOKENS, DecisionListConfig, Smoothing
from .counting import (
    CountingStrategy,
    FrequencyCounter,
    HybridCounter,
    PresenceCounter,
    get_counting_strategy,
)
from .errors import CorpusIOError, DecisionListError, MalformedLineError, MissingLabelError
from .evaluation import EvaluationResult, evaluate
from .features import build_ngrams, extract_features
from .models import Decision, DecisionList, Review
from .preprocessing import ReviewPreprocessor, apply_negation, split_sentences
from .scoring import score_features, signed_log_likelihood, sort_decisions
from .trainer import DecisionListTrainer

__all__ = [
    # Core
    "DecisionListTrainer",
    "DecisionListClassifier",
    "Decision",
    "DecisionList",
    "Review",
    # Configuration
    "DecisionListConfig",
    "DEFAULT_CONFIG",
    "STOP_TOKENS",
    "Smoothing",
    # Preprocessing
    "ReviewPreprocessor",
    "apply_negation",
    "split_sentences",
    "build_ngrams",
    "extract_features",
    # Counting and scoring
    "CountingStrategy",
    "FrequencyCounter",
    "PresenceCounter",
    "HybridCounter",
    "get_counting_strategy",
    "signed_log_likelihood",
    "score_features",
    "sort_decisions",
    # Evaluation
    "EvaluationResult",
    "evaluate",
    # Errors
    "DecisionListError",
    "MalformedLineError",
    "CorpusIOError",
    "MissingLabelError",
]
