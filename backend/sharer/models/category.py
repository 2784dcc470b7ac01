from sharer.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class Category(BaseModel, SoftDeleteMixin):
    __tablename__ = "categories"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True, default="")

    __table_args__ = (
        db.Index(
            "uq_categories_name_live",
            "name",
            unique=True,
            sqlite_where=db.text("deleted_at IS NULL"),
            postgresql_where=db.text("deleted_at IS NULL"),
        ),
    )
