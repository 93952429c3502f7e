from sqlalchemy import (
    Column,
    Float,
    Index,
    Integer,
    String,
    Text,
    create_engine,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Timestamps are 'YYYY-MM-DD HH:MM:SS' strings (UTC); '0000-00-00 00:00:00' means unset.
ZERO_TIMESTAMP = "0000-00-00 00:00:00"


class Category(Base):
    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    parent_id = Column(String, nullable=True, index=True)  # NULL for root categories
    root_id = Column(String, nullable=True, index=True)
    position = Column(Integer, nullable=False, default=0)
    active = Column(Integer, nullable=False, default=1)
    title = Column(String, nullable=False, default="")
    short_description = Column(Text, nullable=False, default="")
    long_description = Column(Text, nullable=False, default="")
    external_link = Column(String, nullable=False, default="")
    timestamp = Column(String, nullable=False, default=ZERO_TIMESTAMP)


class Manufacturer(Base):
    __tablename__ = "manufacturers"

    id = Column(String, primary_key=True)
    active = Column(Integer, nullable=False, default=1)
    icon = Column(String, nullable=False, default="")
    title = Column(String, nullable=False, default="")
    short_description = Column(Text, nullable=False, default="")
    url = Column(String, nullable=False, default="")  # SEO url
    timestamp = Column(String, nullable=False, default=ZERO_TIMESTAMP)


class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True)
    active = Column(Integer, nullable=False, default=1)
    active_from = Column(String, nullable=False, default=ZERO_TIMESTAMP)
    active_to = Column(String, nullable=False, default=ZERO_TIMESTAMP)
    hidden = Column(Integer, nullable=False, default=0)
    sku = Column(String, nullable=False, default="")
    title = Column(String, nullable=False, default="")
    short_description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False, default=0.0)
    stock = Column(Float, nullable=False, default=0.0)
    stock_flag = Column(Integer, nullable=False, default=1)  # 1 standard, 2 offline when sold out, 3 not orderable, 4 external
    delivery_date = Column(String, nullable=False, default="0000-00-00")
    manufacturer_id = Column(String, nullable=True, index=True)
    category_id = Column(String, nullable=True, index=True)  # main category
    timestamp = Column(String, nullable=False, default=ZERO_TIMESTAMP)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, nullable=False, default="")
    first_name = Column(String, nullable=False, default="")
    last_name = Column(String, nullable=False, default="")
    timestamp = Column(String, nullable=False, default=ZERO_TIMESTAMP)


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String, primary_key=True)
    active = Column(Integer, nullable=False, default=0)
    object_id = Column(String, nullable=False, index=True)
    object_type = Column(String, nullable=False, default="product")  # product, recommendation_list, ...
    user_id = Column(String, nullable=False, index=True)
    text = Column(Text, nullable=False, default="")
    rating = Column(Integer, nullable=False, default=0)
    created_at = Column(String, nullable=False, default=ZERO_TIMESTAMP)
    timestamp = Column(String, nullable=False, default=ZERO_TIMESTAMP)

    __table_args__ = (
        Index("idx_reviews_object", "object_type", "object_id"),
    )


def create_all(engine_url: str) -> None:
    engine = create_engine(engine_url)
    Base.metadata.create_all(engine)
