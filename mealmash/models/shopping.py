"""Shopping list item model."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, false
from sqlalchemy.orm import relationship

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class ShoppingListItem(Base, TimestampMixin):
    """Item a user intends to buy."""

    __tablename__ = "shopping_list_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    item_name = Column(String(255), nullable=False)
    normalized_name = Column(String(255), nullable=False)  # Lowercase, trimmed
    quantity = Column(String(255), nullable=False, default="1")
    is_purchased = Column(Boolean, nullable=False, default=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=True, index=True)

    # Relationships
    user = relationship("User", backref="shopping_list_items")
    ingredient = relationship("Ingredient")


# At most one unpurchased row per owner per item name
Index(
    "uq_shopping_user_unpurchased_name",
    ShoppingListItem.user_id,
    ShoppingListItem.normalized_name,
    unique=True,
    sqlite_where=ShoppingListItem.is_purchased == false(),
    postgresql_where=ShoppingListItem.is_purchased == false(),
)
