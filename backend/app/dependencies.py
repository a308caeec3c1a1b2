"""
Servicios API — FastAPI Dependencies
=====================================

What:  Providers that hand each route handler its service.
How:   The StorageGateway built by create_app() lives on `app.state.gateway`;
       every request resolves it from there and wraps it in the service the
       route needs.
"""

from fastapi import Depends, Request

from app.database import StorageGateway
from app.services.auth_service import AuthService
from app.services.product_service import ProductService
from app.services.role_service import RoleService
from app.services.user_service import UserService


def get_gateway(request: Request) -> StorageGateway:
    return request.app.state.gateway


def get_role_service(gateway: StorageGateway = Depends(get_gateway)) -> RoleService:
    return RoleService(gateway)


def get_user_service(gateway: StorageGateway = Depends(get_gateway)) -> UserService:
    return UserService(gateway)


def get_product_service(gateway: StorageGateway = Depends(get_gateway)) -> ProductService:
    return ProductService(gateway)


def get_auth_service(gateway: StorageGateway = Depends(get_gateway)) -> AuthService:
    return AuthService(gateway)
