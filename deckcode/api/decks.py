"""
Deck API endpoints.

Stateless deck code operations: every request carries its deck either as
an entry list or as a deck code, and every response carries the new code.
"""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from deckcode.api.catalog import CardResponse
from deckcode.codec.deck_code import DecodeError
from deckcode.config import MAX_COPIES
from deckcode.models.catalog import CardCatalog, UnknownCardError
from deckcode.models.deck import DeckEntry
from deckcode.services.catalog import get_catalog
from deckcode.services.deck_state import DeckState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckEntryRequest(BaseModel):
    """A card id and copy count."""

    id: int = Field(..., ge=0, description="Catalog id")
    count: int = Field(..., ge=1, le=MAX_COPIES, description="Copies in the deck")


class EncodeRequest(BaseModel):
    """Request model for encoding a deck."""

    entries: list[DeckEntryRequest] = Field(default_factory=list)


class DecodeRequest(BaseModel):
    """Request model for decoding a deck code."""

    code: str = Field(..., max_length=4096)


class DeckCommand(BaseModel):
    """A single add/remove command."""

    action: Literal["add", "remove"]
    id: int = Field(..., ge=0, description="Catalog id")


class EditRequest(BaseModel):
    """Request model for applying commands to a deck code."""

    code: str = Field(default="", max_length=4096)
    commands: list[DeckCommand] = Field(default_factory=list)


class DeckEntryResponse(BaseModel):
    """A deck entry with card details."""

    card: CardResponse
    count: int


class DeckResponse(BaseModel):
    """Response model for a deck."""

    code: str
    total_cards: int
    unique_cards: int
    entries: list[DeckEntryResponse]


def _deck_response(state: DeckState) -> DeckResponse:
    return DeckResponse(
        code=state.code,
        total_cards=state.total_count(),
        unique_cards=len(state),
        entries=[
            DeckEntryResponse(card=CardResponse.from_card(e.card), count=e.count)
            for e in state.entries()
        ],
    )


def _state_from_code(code: str, catalog: CardCatalog) -> DeckState:
    try:
        return DeckState.from_code(code.strip(), catalog)
    except DecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "reason": e.reason.value,
                "message": e.message,
                "fragment": e.fragment,
                "position": e.position,
            },
        ) from e


def _unknown_card(e: UnknownCardError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Card {e.card_id} not found",
    )


@router.post("/encode", response_model=DeckResponse)
async def encode(
    request: EncodeRequest,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> DeckResponse:
    """
    Encode a list of entries as a deck code.

    Returns 400 if a card id is listed twice, 404 if a card is unknown.
    """
    deck: dict[int, DeckEntry] = {}
    for item in request.entries:
        if item.id in deck:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Card {item.id} is listed more than once",
            )
        try:
            card = catalog.lookup(item.id)
        except UnknownCardError as e:
            raise _unknown_card(e) from e
        deck[item.id] = DeckEntry(card=card, count=item.count)

    return _deck_response(DeckState(catalog, deck))


@router.post("/decode", response_model=DeckResponse)
async def decode(
    request: DecodeRequest,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> DeckResponse:
    """
    Decode a deck code.

    Returns 400 with the failure reason if the code is invalid.
    """
    return _deck_response(_state_from_code(request.code, catalog))


@router.post("/edit", response_model=DeckResponse)
async def edit(
    request: EditRequest,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> DeckResponse:
    """
    Apply add/remove commands to a deck code, in order.

    Adding a card already at the copy limit and removing an absent card
    are no-ops. Returns 404 if an added card is unknown.
    """
    state = _state_from_code(request.code, catalog)

    for command in request.commands:
        if command.action == "add":
            try:
                state.add_card(command.id)
            except UnknownCardError as e:
                raise _unknown_card(e) from e
        else:
            state.remove_card(command.id)

    logger.debug("Applied %d commands, code=%s", len(request.commands), state.code)
    return _deck_response(state)
