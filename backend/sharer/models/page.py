from sharer.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from sharer.utils.slug import SLUG_LENGTH


class Page(BaseModel, SoftDeleteMixin):
    __tablename__ = "pages"

    slug = db.Column(db.String(SLUG_LENGTH), nullable=False)
    html_content = db.Column(db.Text, nullable=False)
    title = db.Column(db.String(255), nullable=True)

    # No ON DELETE rule: category removal nulls references in the application layer
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=True, index=True)

    category = db.relationship("Category", lazy="joined")

    __table_args__ = (
        # Slugs are unique among live pages only
        db.Index(
            "uq_pages_slug_live",
            "slug",
            unique=True,
            sqlite_where=db.text("deleted_at IS NULL"),
            postgresql_where=db.text("deleted_at IS NULL"),
        ),
    )

    @property
    def category_name(self):
        if self.category is None or self.category.is_deleted:
            return None
        return self.category.name
