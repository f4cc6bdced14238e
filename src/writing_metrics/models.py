from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class ReadabilityLevel(str, Enum):
    """Flesch reading-ease bands, easiest first."""

    VERY_EASY = "Very Easy"
    EASY = "Easy"
    FAIRLY_EASY = "Fairly Easy"
    STANDARD = "Standard"
    FAIRLY_DIFFICULT = "Fairly Difficult"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"


class SentimentLabel(str, Enum):
    VERY_POSITIVE = "Very Positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    VERY_NEGATIVE = "Very Negative"


class Tone(str, Enum):
    """Register of the whole document decided by the 2:1 marker rule."""

    FORMAL = "Formal"
    CASUAL = "Casual"
    NEUTRAL = "Neutral"


class SentenceType(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"
    COMPLEX = "complex"
    COMPOUND_COMPLEX = "compoundComplex"


class OpeningCategory(str, Enum):
    """First-word categories used by the sentence-variety summary."""

    SUBJECT = "subject"
    VERB = "verb"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    ADVERB = "adverb"
    OTHER = "other"


class OpeningType(str, Enum):
    """First-word categories used by the opening-variety analyzer."""

    SUBJECT = "subject"
    ACTION = "action"
    QUESTION = "question"
    TRANSITION = "transition"
    DESCRIPTION = "description"
    PREPOSITIONAL = "prepositional"
    CONJUNCTION = "conjunction"
    OTHER = "other"


class DocumentType(str, Enum):
    TECHNICAL = "technical"
    ACADEMIC = "academic"
    BUSINESS = "business"
    CREATIVE = "creative"
    SCIENTIFIC = "scientific"
    LEGAL = "legal"
    EDUCATIONAL = "educational"


class ContextTone(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"


class ContextStructure(str, Enum):
    ARGUMENTATIVE = "argumentative"
    DESCRIPTIVE = "descriptive"
    ANALYTICAL = "analytical"


class ContextPurpose(str, Enum):
    INFORMATIVE = "informative"
    PERSUASIVE = "persuasive"
    INSTRUCTIONAL = "instructional"


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class TextStatistics:
    word_count: int
    sentence_count: int
    paragraph_count: int
    char_count: int
    avg_word_length: float
    avg_sentence_length: float
    avg_syllables_per_word: float


@dataclass(frozen=True, slots=True)
class ReadabilityResult:
    """Flesch reading ease (clamped) plus the unclamped Flesch-Kincaid grade."""

    score: float
    grade: float
    level: ReadabilityLevel
    avg_sentence_length: float
    avg_syllables_per_word: float


@dataclass(frozen=True, slots=True)
class ComplexityProfile:
    vocabulary: float
    sentence_length: float
    structure: float
    readability: float
    technical: float
    complex_words: int
    average_word_length: float


@dataclass(frozen=True, slots=True)
class ReadingTimeBucket:
    percentage: float
    seconds: int


@dataclass(frozen=True, slots=True)
class ReadingTimeMetrics:
    estimated_minutes: int
    words_per_minute: int
    complexity_factor: float


@dataclass(frozen=True, slots=True)
class ReadingTimeDistribution:
    """Quick/medium/thorough reading buckets. Percentages are not normalised."""

    quick: ReadingTimeBucket
    medium: ReadingTimeBucket
    thorough: ReadingTimeBucket
    metrics: ReadingTimeMetrics


@dataclass(frozen=True, slots=True)
class LexicalDensity:
    content_words: int
    function_word_count: int
    total: int
    density: float


@dataclass(frozen=True, slots=True)
class VocabularyDiversity:
    basic: float
    moving: float
    root: float
    unique_words: int
    total_words: int


@dataclass(frozen=True, slots=True)
class SentenceSentiment:
    sentence: str
    score: float


@dataclass(frozen=True, slots=True)
class SentimentMetrics:
    total_score: float
    weighted_word_count: int
    average_score: float


@dataclass(frozen=True, slots=True)
class SentimentResult:
    label: SentimentLabel
    normalized_score: float
    details: Tuple[SentenceSentiment, ...]
    metrics: SentimentMetrics


@dataclass(frozen=True, slots=True)
class StructureProfile:
    section_count: int
    list_count: int
    paragraph_word_counts: Tuple[int, ...]
    has_introduction: bool
    has_conclusion: bool


@dataclass(frozen=True, slots=True)
class WordCount:
    word: str
    count: int


@dataclass(frozen=True, slots=True)
class StyleProfile:
    passive_voice_count: int
    repeated_words: Tuple[WordCount, ...]
    long_sentence_count: int
    complex_phrase_count: int
    tone: Tone


@dataclass(frozen=True, slots=True)
class LengthDistribution:
    short: int = 0
    medium: int = 0
    long: int = 0


@dataclass(frozen=True, slots=True)
class LengthVariety:
    score: float = 0.0
    average: float = 0.0
    shortest: int = 0
    longest: int = 0
    std_dev: float = 0.0
    distribution: LengthDistribution = field(default_factory=LengthDistribution)


@dataclass(frozen=True, slots=True)
class StructureVariety:
    score: float = 0.0
    counts: Dict[str, int] = field(
        default_factory=lambda: {kind.value: 0 for kind in SentenceType}
    )


@dataclass(frozen=True, slots=True)
class OpeningSummary:
    score: float = 0.0
    unique_count: int = 0
    type_variety: int = 0
    types: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RhythmSummary:
    score: float = 0.0
    pattern: str = ""


@dataclass(frozen=True, slots=True)
class SentenceVariety:
    lengths: LengthVariety = field(default_factory=LengthVariety)
    structure: StructureVariety = field(default_factory=StructureVariety)
    openings: OpeningSummary = field(default_factory=OpeningSummary)
    rhythm: RhythmSummary = field(default_factory=RhythmSummary)
    composite: int = 0


@dataclass(frozen=True, slots=True)
class AdvancedWritingInsights:
    vocabulary: VocabularyDiversity
    longest_sentence: int
    sentence_variety_score: float
    paragraph_consistency: float
    topic_sentence_strength: int
    sentence_opening_variety: float


@dataclass(frozen=True, slots=True)
class PolarityCounts:
    positive: int
    negative: int


@dataclass(frozen=True, slots=True)
class CohesionRecord:
    """Connective signals for one paragraph."""

    transitions: int
    references: int
    coherence: float
    sentiment: PolarityCounts


@dataclass(frozen=True, slots=True)
class ArgumentMetrics:
    evidence: int
    logic: int
    support: int
    impact: int


@dataclass(frozen=True, slots=True)
class TopicSentenceDetail:
    paragraph_index: int
    sentence: str
    length_score: float
    hook_strength: int
    relevance: float
    clarity: float
    transition_quality: int
    main_idea_presence: int
    coherence: float
    overall: float


@dataclass(frozen=True, slots=True)
class TopicSentenceReport:
    score: float
    details: Tuple[TopicSentenceDetail, ...]
    suggestions: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OpeningDetail:
    first_word: str
    first_phrase: str
    type: OpeningType
    complexity: int
    strength: float


@dataclass(frozen=True, slots=True)
class OpeningVarietyReport:
    score: float = 0.0
    unique_word_variety: float = 0.0
    phrase_variety: float = 0.0
    type_distribution: Dict[str, float] = field(default_factory=dict)
    pattern_quality: float = 0.0
    transition_strength: float = 0.0
    openings: Tuple[OpeningDetail, ...] = ()
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DocumentContext:
    primary_type: DocumentType
    scores: Dict[str, float]
    tone: ContextTone
    structure: ContextStructure
    purpose: ContextPurpose
    complexity: float
    sentence_length: float
    semantic_counts: Dict[str, Dict[str, int]]


@dataclass(frozen=True, slots=True)
class StyleSeries:
    """Labelled per-paragraph readability series."""

    labels: Tuple[str, ...]
    data: Tuple[float, ...]


@dataclass(frozen=True, slots=True)
class KeywordCount:
    word: str
    count: int


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    level: int
    title: str


@dataclass(frozen=True, slots=True)
class Suggestion:
    icon: str
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class AnalyzerFault:
    """An analyzer that raised and was replaced by its empty-text result."""

    analyzer: str
    message: str


@dataclass(frozen=True, slots=True)
class DocumentAnalysis:
    statistics: TextStatistics
    readability: ReadabilityResult
    complexity: ComplexityProfile
    structure: StructureProfile
    style: StyleProfile
    sentiment: SentimentResult
    lexical_density: LexicalDensity
    reading_time: ReadingTimeDistribution
    vocabulary: VocabularyDiversity
    sentence_variety: SentenceVariety
    advanced: AdvancedWritingInsights
    writing_style_evolution: StyleSeries
    cohesion: Tuple[CohesionRecord, ...]
    argument: ArgumentMetrics
    topic_sentences: TopicSentenceReport
    openings: OpeningVarietyReport
    context: DocumentContext
    overall_score: int
    suggestions: Tuple[Suggestion, ...]
    faults: Tuple[AnalyzerFault, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the whole analysis."""
        return asdict(self)
