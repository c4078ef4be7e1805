"""
MCP Server Instructions - Usage guide for AI agents.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Content Intelligence MCP Server - search and analysis over a user's saved items

The server holds no data. Pass the user's collection with every call as
items_json: a JSON array of objects with
    id, title, created_at (ISO-8601)            required
    description, url, tags, content_type        optional

## 1. Searching
Trigger: "find...", "show me...", "what did I save about..."
```
search_content(query="react hooks", items_json="[...]")
```
Results are ranked 0-100 with a match_reason and highlighted title and
description. Timeframes ("yesterday", "last week") and content types
("videos", "notes") in the query are understood. Use analyze_query first
when you want to see how a query will be interpreted.

## 2. Exploring one item
```
find_related_content(item_id="42", items_json="[...]")     # tag / topic / time / site links
find_duplicate_clusters(item_id="42", items_json="[...]")  # near-duplicates + primary item
analyze_content(item_id="42", items_json="[...]")          # both, plus reading time and complexity
```

## 3. Summaries
```
summarize_content(item_json="{...}", length="short")    # short | medium | long | bullets
```
Summaries are extractive: every sentence appears verbatim in the item.

## 4. Getting started
suggest_queries(items_json="[...]") returns up to 8 example queries based on
the collection's most frequent tags.

Errors come back as JSON with success=false, an error message and a suggestion.
"""
