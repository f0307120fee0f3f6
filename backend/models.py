from sqlalchemy import Column, String, Integer, Numeric, Text, DateTime, ForeignKey, Table, Enum, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from database import Base
from domain.value_objects import GoodType, UserRole


def generate_uuid():
    return str(uuid.uuid4())


class IdentityEqualityMixin:
    """
    Equality by primary key.

    Two instances are equal when they are the same object, or when they are of
    the same class and share a non-null id. Transient instances (id is None)
    are only equal to themselves. The hash is per class so it does not change
    when an instance is flushed and receives its id.
    """

    def __eq__(self, other):
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self):
        # Constant per class: an id-based hash would move a pending instance
        # to another bucket after flush. Set lookups degrade to a linear scan,
        # which is fine for per-payment collections.
        return hash(type(self))

    @property
    def is_deleted(self) -> bool:
        """An entity is soft-deleted once its archive date is set."""
        return self.archive_date is not None


# Many-to-many link between payments and goods (owned by Payment)
payment_goods = Table(
    'payment_goods',
    Base.metadata,
    Column('payment_id', Integer, ForeignKey('payments.id'), primary_key=True),
    Column('good_id', Integer, ForeignKey('goods.id'), primary_key=True),
)


class User(IdentityEqualityMixin, Base):
    """
    A customer account.

    The password is stored as provided and is never exposed through response DTOs.
    Archiving a user detaches its payments (see UserService.archive_user_by_id).
    """
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    login = Column(String(50), nullable=False, unique=True)
    password = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    role = Column(Enum(UserRole, native_enum=False, length=20), nullable=False)
    archive_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    payments = relationship("Payment", back_populates="user", cascade="all", collection_class=set)

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("login != ''"),
    )

    def add_payment(self, payment: "Payment") -> None:
        """Attach a payment to this user on both sides of the relationship."""
        self.payments.add(payment)
        payment.user = self

    def remove_payment(self, payment: "Payment") -> None:
        """Detach a payment from this user on both sides of the relationship."""
        payment.user = None
        self.payments.discard(payment)

    def __repr__(self):
        return f"<User id={self.id} login={self.login!r} role={self.role} archived={self.is_deleted}>"


class Good(IdentityEqualityMixin, Base):
    """A catalogue item that can be included in payments."""
    __tablename__ = 'goods'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    type = Column(Enum(GoodType, native_enum=False, length=20), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    archive_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Inverse side; written through Payment.add_good / Payment.remove_good
    payments = relationship("Payment", secondary=payment_goods, back_populates="goods", collection_class=set)

    __table_args__ = (
        CheckConstraint("price > 0"),
        CheckConstraint("stock_quantity >= 0"),
        Index('idx_goods_name', 'name'),
    )

    def __repr__(self):
        return f"<Good id={self.id} name={self.name!r} type={self.type} archived={self.is_deleted}>"


class Payment(IdentityEqualityMixin, Base):
    """
    A purchase made by a user.

    user_id is required when the payment is created but becomes NULL when the
    owning user is archived.
    """
    __tablename__ = 'payments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey('users.id'), nullable=True)
    total_purchase_amount = Column(Numeric(12, 2), nullable=False)
    date_of_purchase = Column(DateTime, nullable=False, default=datetime.utcnow)
    archive_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="payments")
    goods = relationship("Good", secondary=payment_goods, back_populates="payments", collection_class=set)

    __table_args__ = (
        CheckConstraint("total_purchase_amount > 0"),
        Index('idx_payments_user', 'user_id'),
    )

    def add_good(self, good: Good) -> None:
        """Link a good to this payment on both sides of the relationship."""
        self.goods.add(good)
        good.payments.add(self)

    def remove_good(self, good: Good) -> None:
        """Unlink a good from this payment on both sides of the relationship."""
        self.goods.discard(good)
        good.payments.discard(self)

    def __repr__(self):
        return f"<Payment id={self.id} user_id={self.user_id} amount={self.total_purchase_amount} archived={self.is_deleted}>"
