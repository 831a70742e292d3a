"""
Conversational Endpoint - Keyword hints, not language understanding.

Matches the lower-cased message against a short fixed table and suggests
a ready-to-run query. First match wins.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

chat_router = APIRouter()


@dataclass
class ChatRoute:
    """One keyword rule and the canned reply it produces."""
    matches: Callable[[str], bool]
    message: str
    suggested_queries: List[dict] = field(default_factory=list)


HELP_MESSAGE = (
    "I can help you explore SciVal data. Try asking about:\n"
    "- Comparing authors/institutions/journals\n"
    "- Searching for entities\n"
    "- Finding top performers\n"
    "- Analyzing trends over time"
)

CHAT_ROUTES: List[ChatRoute] = [
    ChatRoute(
        matches=lambda text: 'compare' in text and 'author' in text,
        message=(
            "To compare authors, I can use the compareEntities function. "
            "Which two authors would you like to compare, and on which metric?"
        ),
        suggested_queries=[{
            'functionName': 'compareEntities',
            'params': {'entityType': 'author', 'entityIdA': 'auth_001', 'entityIdB': 'auth_002', 'metric': 'hIndex'},
        }],
    ),
    ChatRoute(
        matches=lambda text: 'search' in text,
        message="I can search for authors, institutions, or journals. What would you like to search for?",
        suggested_queries=[{
            'functionName': 'searchEntities',
            'params': {'entityType': 'author', 'query': 'chen', 'limit': 5},
        }],
    ),
    ChatRoute(
        matches=lambda text: 'top' in text,
        message=(
            "I can find top entities ranked by various metrics. "
            "What type of entity and metric are you interested in?"
        ),
        suggested_queries=[{
            'functionName': 'getTopEntities',
            'params': {'entityType': 'author', 'metric': 'citations', 'limit': 5},
        }],
    ),
    ChatRoute(
        matches=lambda text: 'trend' in text,
        message=(
            "I can show trends over time for any entity metric. "
            "Which entity and metric would you like to see?"
        ),
        suggested_queries=[{
            'functionName': 'getTrend',
            'params': {'entityId': 'auth_001', 'metric': 'publications'},
        }],
    ),
]


def suggest(message: str) -> dict:
    """Reply for a chat message: canned text plus any suggested queries."""
    text = message.lower()
    route: Optional[ChatRoute] = next((r for r in CHAT_ROUTES if r.matches(text)), None)
    if route is None:
        return {'message': HELP_MESSAGE, 'suggestedQueries': []}
    return {
        'message': route.message,
        'suggestedQueries': [dict(query, params=dict(query['params'])) for query in route.suggested_queries],
    }


@chat_router.post("/api/chat")
def chat(payload: Any = Body(None)):
    """Suggest a function call for a free-text message."""
    message = payload.get("message") if isinstance(payload, dict) else None
    if not isinstance(message, str) or not message:
        return JSONResponse({"error": "message is required"}, status_code=400)
    return JSONResponse(suggest(message))
