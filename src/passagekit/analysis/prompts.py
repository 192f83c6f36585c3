"""Prompt templates for the passage analysis request."""

from __future__ import annotations

ANALYSIS_TEMPLATE = """
You are analysing a document that has been segmented into passages for
multi-vector retrieval. Focus on making the content fast and accurate to
retrieve with embedding-based search.

## DOCUMENT
- URL: {url}
- Title: {title}
- Total Passages: {total}
- Vector Quality Avg: {avg_vector_quality}
- Retrieval Score Avg: {avg_retrieval_score}

## PASSAGE DATA
{passages_json}

## SECTION MAPPING
{sections_json}

## ANALYSIS REQUIREMENTS

### 1. VECTOR EMBEDDING OPTIMIZATION
- Identify passages with vector_quality >{quality_excellent} (excellent for embeddings)
- Flag passages with vector_quality <{quality_good} (problematic for retrieval)
- Recommend passage lengths and content density
- Suggest improvements for semantic coherence

### 2. MULTI-VECTOR RETRIEVAL STRATEGY
- Top 10 passages for the primary vector index (highest retrieval potential)
- Secondary passages for context augmentation
- Passage clustering opportunities (related content grouping)
- Cross-references between related passages

### 3. CONTENT GAPS & OPPORTUNITIES
- Missing query-intent passages (what users actually search for)
- Underrepresented topics that deserve dedicated passages
- Passages that need question-answer formatting
- Content to restructure for better retrieval

### 4. SEMANTIC STRUCTURE OPTIMIZATION
- Passage flow for coherent retrieval chains
- Merge recommendations (exact passage ids and rationale)
- Split recommendations (break points and new focus areas)
- Hierarchical organisation improvements

### 5. FAST RETRIEVAL RECOMMENDATIONS
- Passages to prioritise in the primary index
- Content density optimisations
- Redundancy elimination
- Preprocessing suggestions for faster embedding generation

### 6. ACTIONABLE IMPLEMENTATION PLAN
Provide 8 specific actions ranked by impact:
1. [HIGH IMPACT] Action on passages [IDs] - Why: [reason] - How: [specific steps]
2. [MEDIUM IMPACT] ...
(Continue for 8 total recommendations)

### 7. TECHNICAL METRICS
- Ideal passage count for this content volume
- Vector dimension considerations
- Embedding overlap strategies
- Performance bottlenecks

Keep every recommendation practical and tied to specific passage ids.
""".strip()
