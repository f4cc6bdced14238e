"""
Static word, phrase and pattern tables shared by the analyzers.

Everything here is built once at import time and never mutated.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import (
    ContextPurpose,
    ContextStructure,
    ContextTone,
    DocumentType,
    OpeningCategory,
    OpeningType,
)

# Lexical density: closed-class words.
FUNCTION_WORDS = frozenset(
    {
        "a", "an", "the",
        "in", "on", "at", "to", "for", "with", "by", "from", "of", "under", "over",
        "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
        "my", "your", "his", "its", "our", "their", "mine", "yours", "hers", "ours", "theirs",
        "am", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "shall", "should",
        "may", "might", "must", "and", "but", "or", "nor", "yet", "so", "if", "then",
        "while", "because", "than", "that", "this", "these", "those", "such", "what",
        "who", "which",
    }
)

# Topic-sentence relevance.
STOP_WORDS = frozenset(
    {
        "the", "be", "to", "of", "and", "a", "in", "that", "have",
        "it", "for", "not", "on", "with", "he", "as", "you", "do",
        "at", "this", "but", "his", "by", "from", "they", "we", "say",
        "her", "she", "or", "an", "will", "my", "one", "all", "would",
        "there", "their", "what", "so", "up", "out", "if", "about",
    }
)

# Sentiment.
POSITIVE_WORDS: Mapping[str, float] = MappingProxyType(
    {
        "excellent": 2.0,
        "outstanding": 2.0,
        "exceptional": 2.0,
        "superb": 2.0,
        "fantastic": 2.0,
        "amazing": 2.0,
        "wonderful": 2.0,
        "brilliant": 2.0,
        "good": 1.5,
        "great": 1.5,
        "effective": 1.5,
        "positive": 1.5,
        "successful": 1.5,
        "beneficial": 1.5,
        "valuable": 1.5,
        "efficient": 1.5,
        "better": 1.0,
        "improved": 1.0,
        "helpful": 1.0,
        "useful": 1.0,
        "nice": 1.0,
        "decent": 1.0,
        "satisfactory": 1.0,
    }
)

NEGATIVE_WORDS: Mapping[str, float] = MappingProxyType(
    {
        "terrible": -2.0,
        "horrible": -2.0,
        "awful": -2.0,
        "disastrous": -2.0,
        "bad": -1.5,
        "poor": -1.5,
        "negative": -1.5,
        "problematic": -1.5,
        "disappointing": -1.0,
        "inferior": -1.0,
        "inadequate": -1.0,
    }
)

SENTIMENT_LEXICON: Mapping[str, float] = MappingProxyType(
    {**POSITIVE_WORDS, **NEGATIVE_WORDS}
)

INTENSIFIERS: Mapping[str, float] = MappingProxyType(
    {
        "very": 1.5,
        "extremely": 2.0,
        "highly": 1.75,
        "incredibly": 2.0,
        "really": 1.5,
        "particularly": 1.25,
        "absolutely": 2.0,
        "truly": 1.5,
    }
)

# Apostrophes are stripped before scoring, so contractions appear joined.
NEGATIONS = frozenset(
    {
        "not", "no", "never", "neither", "nor", "none", "nothing",
        "nowhere", "hardly", "scarcely", "barely", "doesnt", "dont",
        "didnt", "wasnt", "werent", "havent", "hasnt", "hadnt",
    }
)

PARAGRAPH_POSITIVE_WORDS = frozenset(
    {"good", "great", "excellent", "positive", "success", "benefit"}
)
PARAGRAPH_NEGATIVE_WORDS = frozenset(
    {"bad", "poor", "negative", "problem", "difficult", "risk"}
)

# Cohesion.
COHESION_TRANSITIONS: Tuple[str, ...] = (
    "however", "therefore", "furthermore", "moreover", "nevertheless",
    "in addition", "besides", "similarly", "subsequently", "conversely",
    "accordingly", "alternatively", "indeed", "likewise",
)
COHESION_TRANSITION_PATTERNS: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{re.escape(term)}\b") for term in COHESION_TRANSITIONS
)

REFERENCE_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(r"\[\d+\]"),
    re.compile(r"\([^)]+\d{4}\)"),
    re.compile(r"\b(?:et al\.|ibid\.)", re.IGNORECASE),
    re.compile(r'"[^"]+"'),
)

# Topic sentences.
TOPIC_TRANSITION_PHRASES: Tuple[str, ...] = (
    "furthermore", "moreover", "in addition", "similarly",
    "however", "nevertheless", "on the other hand",
    "consequently", "therefore", "thus", "as a result",
)

JARGON_TERMS: Tuple[str, ...] = (
    "leverage", "synergy", "paradigm", "optimization",
    "methodology", "implementation", "framework", "infrastructure",
)

HOOK_QUESTION = re.compile(r"\?")
HOOK_STATISTIC = re.compile(r"\d+(?:%|\s*percent|\s*times)?")
HOOK_QUOTE = re.compile(r'"[^"]+"')
HOOK_PRONOUNCEMENT = re.compile(
    r"\b(?:important|significant|crucial|essential)\b", re.IGNORECASE
)
HOOK_CONTRAST = re.compile(
    r"\b(?:however|although|unlike|contrary|whereas)\b", re.IGNORECASE
)

TOPIC_WORD_PATTERN = re.compile(r"\b\w{4,}\b", re.ASCII)

PASSIVE_PATTERN = re.compile(
    r"\b(?:am|is|are|was|were|be|been|being)\s+\w+ed\b", re.IGNORECASE
)
PERFECT_PASSIVE_PATTERN = re.compile(
    r"\b(?:has|have|had)\s+been\s+\w+ed\b", re.IGNORECASE
)

# Opening variety.
OPENING_TYPE_PATTERNS: Tuple[Tuple[OpeningType, re.Pattern[str]], ...] = (
    (
        OpeningType.SUBJECT,
        re.compile(
            r"^(?:the|a|an|this|that|these|those|my|your|his|her|its|our|their)\b",
            re.IGNORECASE,
        ),
    ),
    (OpeningType.ACTION, re.compile(r"^(?:\w+ed|\w+ing)\b", re.IGNORECASE)),
    (OpeningType.QUESTION, re.compile(r"^(?:who|what|when|where|why|how)\b", re.IGNORECASE)),
    (
        OpeningType.TRANSITION,
        re.compile(
            r"^(?:however|moreover|furthermore|additionally|therefore)\b", re.IGNORECASE
        ),
    ),
    (OpeningType.DESCRIPTION, re.compile(r"^(?:\w+ly)\b", re.IGNORECASE)),
    (
        OpeningType.PREPOSITIONAL,
        re.compile(r"^(?:in|on|at|by|with|under|over)\b", re.IGNORECASE),
    ),
    (
        OpeningType.CONJUNCTION,
        re.compile(
            r"^(?:and|but|or|nor|yet|so|if|then|while|because)\b", re.IGNORECASE
        ),
    ),
)

OPENING_PREPOSITION = re.compile(r"^(?:in|on|at|by|with|under|over)\b", re.IGNORECASE)

IMPACT_WORDS = frozenset(
    {
        "significantly", "dramatically", "fundamentally",
        "crucially", "essentially", "notably", "remarkably",
    }
)

GOOD_TRANSITION_WORDS = frozenset(
    {
        "however", "moreover", "furthermore", "additionally",
        "consequently", "therefore", "nevertheless", "alternatively",
    }
)

# Sentence variety.
OPENING_CATEGORY_PATTERNS: Tuple[Tuple[OpeningCategory, re.Pattern[str]], ...] = (
    (
        OpeningCategory.SUBJECT,
        re.compile(
            r"^(?:the|a|an|this|that|these|those|my|your|his|her|its|our|their)\b",
            re.IGNORECASE,
        ),
    ),
    (
        OpeningCategory.VERB,
        re.compile(
            r"^(?:is|are|was|were|have|has|had|do|does|did|will|would|shall|should"
            r"|may|might|must|can|could)\b",
            re.IGNORECASE,
        ),
    ),
    (
        OpeningCategory.PREPOSITION,
        re.compile(r"^(?:in|on|at|to|for|with|by|from|of|under|over)\b", re.IGNORECASE),
    ),
    (
        OpeningCategory.CONJUNCTION,
        re.compile(
            r"^(?:and|but|or|nor|yet|so|if|then|while|because)\b", re.IGNORECASE
        ),
    ),
    (
        OpeningCategory.ADVERB,
        re.compile(
            r"^(?:quickly|slowly|carefully|suddenly|finally|unfortunately|surprisingly)\b",
            re.IGNORECASE,
        ),
    ),
)

COORDINATOR_PATTERN = re.compile(r"\b(?:and|or|but)\b")
SUBORDINATOR_PATTERN = re.compile(r"\b(?:because|since|although|when|if)\b")
# Case-sensitive, and the coordinator has to come before the subordinator.
COMPOUND_COMPLEX_PATTERN = re.compile(
    r"\b(?:and|or|but)\b.*\b(?:because|since|although|when|if)\b"
)
SIMPLE_SENTENCE_PATTERN = re.compile(r"^[^,;:]+$")

IDEAL_STRUCTURE_MIX: Mapping[str, float] = MappingProxyType(
    {"simple": 30.0, "compound": 30.0, "complex": 30.0, "compoundComplex": 10.0}
)

# Structure and style.
HEADING_PATTERN = re.compile(r"(#{1,6})\s+(.+)")
LIST_PATTERN = re.compile(r"(?:^|\n)\s*(?:[-*+]|\d+\.)\s+", re.MULTILINE)

INTRODUCTION_PATTERN = re.compile(
    r"\b(?:introduction|to begin with|initially|first of all|this document"
    r"|this paper|this report|this analysis)\b",
    re.IGNORECASE,
)
CONCLUSION_PATTERN = re.compile(
    r"\b(?:in conclusion|to conclude|finally|in summary|to summarize)\b",
    re.IGNORECASE,
)

COMPLEX_PHRASES: Tuple[str, ...] = (
    "in order to", "due to the fact that", "in spite of",
    "with regard to", "in the event that", "by virtue of",
    "for the purpose of", "in the course of", "in the process of",
)

FORMAL_TONE_PATTERN = re.compile(
    r"\b(?:therefore|moreover|consequently|thus|hence|accordingly|furthermore"
    r"|additionally|in addition|subsequently)\b",
    re.IGNORECASE,
)
CASUAL_TONE_PATTERN = re.compile(
    r"\b(?:like|basically|kind of|sort of|you know|stuff|things|okay)\b",
    re.IGNORECASE,
)

# Document context.
SEMANTIC_PATTERNS: Mapping[str, Tuple[Tuple[str, re.Pattern[str]], ...]] = MappingProxyType(
    {
        "tone": (
            (
                ContextTone.FORMAL.value,
                re.compile(
                    r"\b(?:furthermore|moreover|consequently|therefore|thus|hence"
                    r"|accordingly|additionally|in addition|subsequently)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextTone.CASUAL.value,
                re.compile(
                    r"\b(?:basically|actually|pretty|kind of|sort of|you know|stuff"
                    r"|things|okay)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextTone.TECHNICAL.value,
                re.compile(
                    r"\b(?:implementation|methodology|algorithm|framework"
                    r"|infrastructure)\b",
                    re.IGNORECASE,
                ),
            ),
        ),
        "structure": (
            (
                ContextStructure.ARGUMENTATIVE.value,
                re.compile(
                    r"\b(?:however|although|despite|argue|support|evidence|contrary"
                    r"|but|yet|nevertheless|on the contrary)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextStructure.DESCRIPTIVE.value,
                re.compile(
                    r"\b(?:appears|seems|looks|feels|sounds|represents|shows)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextStructure.ANALYTICAL.value,
                re.compile(
                    r"\b(?:analyze|examine|investigate|evaluate|assess|measure"
                    r"|scrutinize|appraise|explore|review|interpret)\b",
                    re.IGNORECASE,
                ),
            ),
        ),
        "purpose": (
            (
                ContextPurpose.INFORMATIVE.value,
                re.compile(
                    r"\b(?:explain|describe|outline|present|introduce|overview"
                    r"|clarify|delineate)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextPurpose.PERSUASIVE.value,
                re.compile(
                    r"\b(?:should|must|need|recommend|suggest|propose|consider)\b",
                    re.IGNORECASE,
                ),
            ),
            (
                ContextPurpose.INSTRUCTIONAL.value,
                re.compile(
                    r"\b(?:step|guide|instruction|process|procedure|method|tutorial"
                    r"|directions)\b",
                    re.IGNORECASE,
                ),
            ),
        ),
    }
)

# (domain, primary keywords, secondary markers, multiplier), in tie-break order.
DOMAIN_PROFILES: Tuple[Tuple[DocumentType, re.Pattern[str], re.Pattern[str], float], ...] = (
    (
        DocumentType.TECHNICAL,
        re.compile(
            r"\b(?:code|api|function|data|implementation|system|algorithm|interface"
            r"|module|database)\b",
            re.IGNORECASE,
        ),
        re.compile(r"\b(?:class|method|function|return|import|export)\b", re.IGNORECASE),
        1.2,
    ),
    (
        DocumentType.ACADEMIC,
        re.compile(
            r"\b(?:research|study|analysis|theory|hypothesis|methodology|findings"
            r"|literature|empirical)\b",
            re.IGNORECASE,
        ),
        re.compile(r"\(\w+\s*(?:et al\.?)?,\s*\d{4}\)|(?:\[[\d,\s]+\])", re.IGNORECASE),
        1.1,
    ),
    (
        DocumentType.BUSINESS,
        re.compile(
            r"\b(?:market|strategy|revenue|customer|profit|ROI|stakeholder|investment"
            r"|growth)\b",
            re.IGNORECASE,
        ),
        re.compile(r"(?<!\w)(?:\d+(?:\.\d+)?%|[$€£]\d+(?:,\d{3})*(?:\.\d{2})?)"),
        1.0,
    ),
    (
        DocumentType.CREATIVE,
        re.compile(
            r"\b(?:story|character|plot|scene|dialogue|setting|theme|narrative"
            r"|conflict)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"[\"'](?:[^\"'\\]|\\.)*[\"']|\b(?:metaphor|symbolism|imagery)\b",
            re.IGNORECASE,
        ),
        1.0,
    ),
    (
        DocumentType.SCIENTIFIC,
        re.compile(
            r"\b(?:experiment|observation|hypothesis|data|analysis|results"
            r"|conclusion|method)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"\b(?:[A-Z][a-z]*\d*(?:\s*[+\-=]\s*[A-Z][a-z]*\d*)+|\d+\s*(?:[+\-*/]\s*\d+)+)\b"
        ),
        1.3,
    ),
    (
        DocumentType.LEGAL,
        re.compile(
            r"\b(?:pursuant|herein|thereof|agreement|contract|party|clause|provision)\b",
            re.IGNORECASE,
        ),
        re.compile(r"\b(?:Section|Article|Clause)\s+\d+(?:\.\d+)*\b", re.IGNORECASE),
        1.2,
    ),
    (
        DocumentType.EDUCATIONAL,
        re.compile(
            r"\b(?:learn|teach|student|concept|exercise|practice|understand|explain)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"\b(?:chapter|lesson|module|quiz|assignment|objective)\b", re.IGNORECASE
        ),
        1.1,
    ),
)
