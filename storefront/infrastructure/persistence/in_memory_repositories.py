"""In-memory repository implementations.

Dictionary-backed adapters for the domain repository protocols. They store
aggregates by id and keep secondary indexes for the unique lookups (SKU,
email, order number, cart owner).

Aggregates are stored by reference: an adapter hands back the same object
it was given, so it is meant for a single process (tests, demos, local
runs). Domain event outboxes are never touched by the repositories.
"""

from uuid import UUID

from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order
from storefront.domain.entities.product import Product
from storefront.domain.entities.shopping_cart import ShoppingCart
from storefront.domain.errors.domain_exceptions import DuplicateItemError, NotFoundError
from storefront.domain.value_objects.email import Email
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.order_number import OrderNumber
from storefront.domain.value_objects.product_sku import ProductSku


class RepositoryError:
    """Repository error constants."""

    ALREADY_EXISTS = "Entity already exists"
    NOT_FOUND = "Entity not found"
    SKU_TAKEN = "Product SKU is already in use"
    EMAIL_TAKEN = "Email address is already registered"
    ORDER_NUMBER_TAKEN = "Order number is already in use"
    CUSTOMER_HAS_CART = "Customer already has a cart"


class InMemoryProductRepository:
    """In-memory implementation of ProductRepository protocol."""

    def __init__(self) -> None:
        self._products: dict[UUID, Product] = {}

    async def find_by_id(self, product_id: UUID) -> Product | None:
        return self._products.get(product_id)

    async def find_by_sku(self, sku: ProductSku | str) -> Product | None:
        """Find product by SKU.

        Malformed SKUs simply match nothing.
        """
        wanted = str(sku).strip().upper()
        return next(
            (p for p in self._products.values() if p.sku.value == wanted), None
        )

    async def list_all(self, include_deleted: bool = False) -> list[Product]:
        return [
            p for p in self._products.values() if include_deleted or not p.is_deleted
        ]

    async def search(
        self,
        name_filter: str | None = None,
        category: str | None = None,
        min_price: Money | None = None,
        max_price: Money | None = None,
    ) -> list[Product]:
        """Search non-deleted products by name, category and price range."""
        needle = name_filter.strip().lower() if name_filter else None
        wanted_category = category.strip().lower() if category else None

        results = []
        for product in await self.list_all():
            if needle and needle not in product.name.lower():
                continue
            if wanted_category and product.category.lower() != wanted_category:
                continue
            if min_price is not None and (
                not product.price.same_currency_as(min_price) or product.price < min_price
            ):
                continue
            if max_price is not None and (
                not product.price.same_currency_as(max_price) or product.price > max_price
            ):
                continue
            results.append(product)
        return results

    async def add(self, product: Product) -> None:
        if product.id in self._products:
            raise DuplicateItemError(RepositoryError.ALREADY_EXISTS, id=str(product.id))
        if await self.find_by_sku(product.sku) is not None:
            raise DuplicateItemError(RepositoryError.SKU_TAKEN, sku=product.sku.value)
        self._products[product.id] = product

    async def update(self, product: Product) -> None:
        if product.id not in self._products:
            raise NotFoundError(RepositoryError.NOT_FOUND, id=str(product.id))
        self._products[product.id] = product


class InMemoryCustomerRepository:
    """In-memory implementation of CustomerRepository protocol.

    Enforces one customer per email address.
    """

    def __init__(self) -> None:
        self._customers: dict[UUID, Customer] = {}

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        return self._customers.get(customer_id)

    async def find_by_email(self, email: Email | str) -> Customer | None:
        wanted = str(email).strip().lower()
        return next(
            (c for c in self._customers.values() if c.email.value == wanted), None
        )

    async def exists_by_email(self, email: Email | str) -> bool:
        return await self.find_by_email(email) is not None

    async def list_all(self) -> list[Customer]:
        return list(self._customers.values())

    async def add(self, customer: Customer) -> None:
        if customer.id in self._customers:
            raise DuplicateItemError(RepositoryError.ALREADY_EXISTS, id=str(customer.id))
        if await self.exists_by_email(customer.email):
            raise DuplicateItemError(
                RepositoryError.EMAIL_TAKEN, email=customer.email.value
            )
        self._customers[customer.id] = customer

    async def update(self, customer: Customer) -> None:
        if customer.id not in self._customers:
            raise NotFoundError(RepositoryError.NOT_FOUND, id=str(customer.id))
        owner = await self.find_by_email(customer.email)
        if owner is not None and owner.id != customer.id:
            raise DuplicateItemError(
                RepositoryError.EMAIL_TAKEN, email=customer.email.value
            )
        self._customers[customer.id] = customer


class InMemoryOrderRepository:
    """In-memory implementation of OrderRepository protocol."""

    def __init__(self) -> None:
        self._orders: dict[UUID, Order] = {}

    async def find_by_id(self, order_id: UUID) -> Order | None:
        return self._orders.get(order_id)

    async def find_by_order_number(self, order_number: OrderNumber | str) -> Order | None:
        wanted = str(order_number).strip()
        return next(
            (o for o in self._orders.values() if o.order_number.value == wanted), None
        )

    async def find_by_customer_id(self, customer_id: UUID) -> list[Order]:
        """List a customer's orders, newest first."""
        orders = [o for o in self._orders.values() if o.customer_id == customer_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    async def list_all(self) -> list[Order]:
        return list(self._orders.values())

    async def add(self, order: Order) -> None:
        if order.id in self._orders:
            raise DuplicateItemError(RepositoryError.ALREADY_EXISTS, id=str(order.id))
        if await self.find_by_order_number(order.order_number) is not None:
            raise DuplicateItemError(
                RepositoryError.ORDER_NUMBER_TAKEN, order_number=order.order_number.value
            )
        self._orders[order.id] = order

    async def update(self, order: Order) -> None:
        if order.id not in self._orders:
            raise NotFoundError(RepositoryError.NOT_FOUND, id=str(order.id))
        self._orders[order.id] = order


class InMemoryCartRepository:
    """In-memory implementation of CartRepository protocol.

    A customer owns at most one cart.
    """

    def __init__(self) -> None:
        self._carts: dict[UUID, ShoppingCart] = {}

    async def find_by_id(self, cart_id: UUID) -> ShoppingCart | None:
        return self._carts.get(cart_id)

    async def find_by_customer_id(self, customer_id: UUID) -> ShoppingCart | None:
        return next(
            (c for c in self._carts.values() if c.customer_id == customer_id), None
        )

    async def list_all(self) -> list[ShoppingCart]:
        return list(self._carts.values())

    async def add(self, cart: ShoppingCart) -> None:
        if cart.id in self._carts:
            raise DuplicateItemError(RepositoryError.ALREADY_EXISTS, id=str(cart.id))
        if await self.find_by_customer_id(cart.customer_id) is not None:
            raise DuplicateItemError(
                RepositoryError.CUSTOMER_HAS_CART, customer_id=str(cart.customer_id)
            )
        self._carts[cart.id] = cart

    async def update(self, cart: ShoppingCart) -> None:
        if cart.id not in self._carts:
            raise NotFoundError(RepositoryError.NOT_FOUND, id=str(cart.id))
        self._carts[cart.id] = cart
