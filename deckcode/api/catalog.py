"""
Catalog API endpoints.

Read-only access to the card catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from deckcode.models.card import Card, CardType
from deckcode.models.catalog import CardCatalog
from deckcode.services.catalog import get_catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])


class CardResponse(BaseModel):
    """Response model for a single card."""

    id: int
    name: str
    type: CardType
    effect: str = ""
    group: str = ""
    cost: int | None = None
    attack: int | None = None
    defense: int | None = None

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.index,
            name=card.name,
            type=card.type,
            effect=card.effect,
            group=card.group,
            cost=card.cost,
            attack=card.attack,
            defense=card.defense,
        )


class CatalogResponse(BaseModel):
    """Response model for a list of cards."""

    cards: list[CardResponse]
    count: int


@router.get("", response_model=CatalogResponse)
async def list_cards(
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
    card_type: Annotated[CardType | None, Query(alias="type")] = None,
    search: str = "",
) -> CatalogResponse:
    """
    List catalog cards.

    Optionally filtered by card type and a case-insensitive name substring.
    Cards are returned in catalog order.
    """
    cards = [CardResponse.from_card(c) for c in catalog.filter(card_type, search)]
    return CatalogResponse(cards=cards, count=len(cards))


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: int,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> CardResponse:
    """
    Get a single card by catalog id.

    Returns 404 if the card is not in the catalog.
    """
    card = catalog.get(card_id)
    if card is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {card_id} not found",
        )
    return CardResponse.from_card(card)
