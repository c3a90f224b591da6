"""
Intent classification for career assistant questions.

The classifier is trained once at process start on a fixed set of example
questions and injected wherever questions are dispatched (see
main.lifespan and routers.qna); nothing reads it from module state.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.neighbors import NearestNeighbors

logger = logging.getLogger(__name__)

INTENT_GAPS = "career.gaps"
INTENT_SKILLS = "career.skills"
INTENT_JOBS = "career.jobs"
INTENT_COURSES = "career.courses"
INTENTS = (INTENT_GAPS, INTENT_SKILLS, INTENT_JOBS, INTENT_COURSES)

# (example question, intent)
TRAINING_DOCUMENTS: List[Tuple[str, str]] = [
    ("Do I have career gaps", INTENT_GAPS),
    ("Are there any gaps in my career", INTENT_GAPS),
    ("Show me my employment breaks", INTENT_GAPS),
    ("Was I unemployed between jobs", INTENT_GAPS),
    ("What are my skills", INTENT_SKILLS),
    ("Which skills do I have", INTENT_SKILLS),
    ("List my competencies", INTENT_SKILLS),
    ("What am I good at", INTENT_SKILLS),
    ("Find jobs for me", INTENT_JOBS),
    ("Which jobs match my profile", INTENT_JOBS),
    ("Show me job opportunities", INTENT_JOBS),
    ("What positions should I apply for", INTENT_JOBS),
    ("Recommend courses", INTENT_COURSES),
    ("What courses should I take", INTENT_COURSES),
    ("Suggest training programs", INTENT_COURSES),
    ("How can I learn new skills through a course", INTENT_COURSES),
]


@dataclass
class IntentPrediction:
    intent: Optional[str]
    confidence: float  # 0-1


class IntentClassifier(Protocol):
    def classify(self, text: str) -> IntentPrediction:
        ...


class NearestNeighbourIntentClassifier:
    """
    TF-IDF vectors over word unigrams/bigrams, cosine nearest neighbour
    against the training questions. Confidence is the cosine similarity of
    the closest example; below `threshold` the intent is None.
    """

    def __init__(self, documents: Sequence[Tuple[str, str]] = TRAINING_DOCUMENTS, threshold: float = 0.35):
        if not documents:
            raise ValueError("Intent classifier needs at least one training document")
        self.threshold = threshold
        self.labels = [intent for _, intent in documents]
        self.vectorizer = TfidfVectorizer(lowercase=True, ngram_range=(1, 2))
        matrix = self.vectorizer.fit_transform([text for text, _ in documents])
        self.index = NearestNeighbors(n_neighbors=1, metric="cosine", algorithm="brute")
        self.index.fit(matrix)
        logger.info("Intent classifier trained on %d documents", len(documents))

    def classify(self, text: str) -> IntentPrediction:
        if not text or not text.strip():
            return IntentPrediction(intent=None, confidence=0.0)
        vector = self.vectorizer.transform([text])
        if vector.nnz == 0:
            # No known vocabulary at all
            return IntentPrediction(intent=None, confidence=0.0)
        distances, indices = self.index.kneighbors(vector)
        similarity = max(0.0, 1.0 - float(distances[0][0]))
        intent = self.labels[int(indices[0][0])]
        if similarity < self.threshold:
            return IntentPrediction(intent=None, confidence=similarity)
        return IntentPrediction(intent=intent, confidence=similarity)
