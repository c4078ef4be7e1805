"""
Content Intelligence

Analyzes the item collection itself:
- SimilarityEngine: four-signal pairwise similarity
- RelationshipLinker: ranked related-item links
- DuplicateDetector: near-duplicate clusters with a primary item
- Summarizer: extractive summaries, key points, actionable items
- ContentAnalyzer: all of the above plus text quality metrics
"""

from __future__ import annotations

from .content_analysis import (
    ContentAnalyzer,
    assess_complexity,
    assess_summary_quality,
    estimate_reading_time,
)
from .duplicates import DuplicateDetector, cluster_reason, primary_score
from .relationships import RelationshipLinker
from .similarity import (
    SimilarityEngine,
    common_tags,
    semantic_similarity,
    tag_similarity,
    temporal_similarity,
    url_similarity,
)
from .summarizer import Summarizer, split_sentences, summary_confidence

__all__ = [
    # Similarity
    "SimilarityEngine",
    "tag_similarity",
    "semantic_similarity",
    "temporal_similarity",
    "url_similarity",
    "common_tags",
    # Relationships
    "RelationshipLinker",
    # Duplicates
    "DuplicateDetector",
    "primary_score",
    "cluster_reason",
    # Summaries
    "Summarizer",
    "split_sentences",
    "summary_confidence",
    # Content analysis
    "ContentAnalyzer",
    "assess_summary_quality",
    "estimate_reading_time",
    "assess_complexity",
]
