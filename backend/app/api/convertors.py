"""
Path convertors for the product routes.

A value that does not match a convertor's regex makes the whole route
miss, so the client gets a routing 404 rather than a validation error.
"""
from starlette.convertors import Convertor, register_url_convertor

from app.repositories.product_repo import ProductField, SortMode


class _EnumConvertor(Convertor):
    enum_cls = None

    def convert(self, value: str):
        return self.enum_cls(value)

    def to_string(self, value) -> str:
        return self.enum_cls(value).value


class OrderFieldConvertor(_EnumConvertor):
    regex = "name|price"
    enum_cls = ProductField


class SortModeConvertor(_EnumConvertor):
    regex = "asc|desc"
    enum_cls = SortMode


class SearchConvertor(Convertor):
    # like "path" but never empty
    regex = ".+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("order_field", OrderFieldConvertor())
register_url_convertor("sort_mode", SortModeConvertor())
register_url_convertor("search", SearchConvertor())
