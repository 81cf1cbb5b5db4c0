# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.cart.add_to_cart import AddToCartUseCase
from .use_cases.cart.clear_cart import ClearCartUseCase
from .use_cases.cart.get_cart import GetCartUseCase
from .use_cases.cart.remove_from_cart import RemoveFromCartUseCase
from .use_cases.catalog.create_product import CreateProductUseCase
from .use_cases.catalog.get_product import GetProductUseCase
from .use_cases.catalog.list_products import ListProductsUseCase
from .use_cases.catalog.update_inventory import UpdateInventoryUseCase
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.resolve_identity import ResolveIdentityUseCase

__all__ = [
    "AddToCartUseCase",
    "ClearCartUseCase",
    "CreateProductUseCase",
    "GetCartUseCase",
    "GetCurrentUserUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "RemoveFromCartUseCase",
    "ResolveIdentityUseCase",
    "UpdateInventoryUseCase",
]
