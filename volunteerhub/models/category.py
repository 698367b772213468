# volunteerhub/models/category.py

from .base import BaseModel, db


class Category(BaseModel):
    """Static reference data used to classify events"""

    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(50), nullable=True)  # icon key, e.g. "leaf"

    events = db.relationship("Event", back_populates="category")

    def __repr__(self):
        return f"<Category {self.name}>"
