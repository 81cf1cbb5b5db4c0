# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from decimal import Decimal
from functools import cached_property

from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.application.services.tokens import JwtTokenService
from storefront.application.use_cases.cart.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.cart.clear_cart import ClearCartUseCase
from storefront.application.use_cases.cart.get_cart import GetCartUseCase
from storefront.application.use_cases.cart.remove_from_cart import RemoveFromCartUseCase
from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.catalog.get_product import GetProductUseCase
from storefront.application.use_cases.catalog.list_products import ListProductsUseCase
from storefront.application.use_cases.catalog.update_inventory import UpdateInventoryUseCase
from storefront.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.domain.catalog.entities import NewProduct
from storefront.domain.users.repositories import Clock
from storefront.infrastructure.clock import SystemClock
from storefront.infrastructure.repositories.cart.in_memory_cart_repository import (
    InMemoryCartRepository,
)
from storefront.infrastructure.repositories.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from storefront.infrastructure.repositories.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.cart_controller import CartController
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.interfaces.http.controllers.products_controller import ProductsController
from storefront.shared.config import AppConfig
from storefront.shared.logging import logger

DEMO_PRODUCTS: tuple[NewProduct, ...] = (
    NewProduct(
        name="Laptop Pro",
        description="High-performance laptop for professionals",
        price=Decimal("1299.99"),
        inventory_count=10,
    ),
    NewProduct(
        name="Wireless Mouse",
        description="Ergonomic wireless mouse with 6 buttons",
        price=Decimal("29.99"),
        inventory_count=50,
    ),
    NewProduct(
        name="Mechanical Keyboard",
        description="RGB mechanical keyboard with blue switches",
        price=Decimal("149.99"),
        inventory_count=20,
    ),
)


class Container:
    def __init__(self, config: AppConfig, *, clock: Clock | None = None) -> None:
        self._config = config
        self._clock = clock or SystemClock()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(secret=self._config.jwt_secret, clock=self._clock)

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @cached_property
    def product_repository(self) -> InMemoryProductRepository:
        products = InMemoryProductRepository()
        if self._config.seed_catalog:
            for new_product in DEMO_PRODUCTS:
                products.create(new_product)
            logger.info(f"catalog.seed: created {len(DEMO_PRODUCTS)} demo products")
        return products

    @cached_property
    def cart_repository(self) -> InMemoryCartRepository:
        return InMemoryCartRepository()

    @cached_property
    def resolve_identity_use_case(self) -> ResolveIdentityUseCase:
        return ResolveIdentityUseCase(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=GetCurrentUserUseCase(users=self.user_repository),
            identity=self.resolve_identity_use_case,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            list_use_case=ListProductsUseCase(self.product_repository),
            get_use_case=GetProductUseCase(self.product_repository),
            create_use_case=CreateProductUseCase(self.product_repository),
            update_inventory_use_case=UpdateInventoryUseCase(self.product_repository),
            identity=self.resolve_identity_use_case,
        )

    @cached_property
    def cart_controller(self) -> CartController:
        return CartController(
            get_use_case=GetCartUseCase(self.cart_repository),
            add_use_case=AddToCartUseCase(
                carts=self.cart_repository, products=self.product_repository
            ),
            remove_use_case=RemoveFromCartUseCase(self.cart_repository),
            clear_use_case=ClearCartUseCase(self.cart_repository),
            identity=self.resolve_identity_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
