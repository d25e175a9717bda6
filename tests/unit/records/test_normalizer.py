"""
Tests for record normalization (wire record <-> entity).
"""

import json

import pytest

from storefront.core.exceptions import FieldShapeError, MalformedFieldError
from storefront.domain import Category, Order, OrderDraft, OrderPatch, Product, ProductDraft, ProductPatch
from storefront.records.codecs import encode_line_list
from storefront.records.normalizer import (
    decode_category,
    decode_order,
    decode_product,
    encode_order_create,
    encode_order_update,
    encode_product_create,
    encode_product_update,
)


class TestDecodeOrder:
    def test_decodes_json_columns(self, raw_order):
        order = decode_order(raw_order)

        assert isinstance(order, Order)
        assert order.id == 12
        assert order.items == [{"name": "Wireless Headphones", "quantity": 2, "price": 129.99}]
        assert order.delivery_address == {"street": "12 Rustaveli Ave", "city": "Tbilisi"}

    def test_other_fields_pass_through(self, raw_order):
        order = decode_order(raw_order)

        assert order.total == 259.98
        assert order.status == "shipped"
        assert order.order_date == "2024-03-01T10:15:00.000Z"
        # Backend system fields are kept
        assert order.to_record()["Name"] == "Order 12"

    def test_absent_items_and_address(self):
        order = decode_order({"Id": 1, "status_c": "pending"})

        assert order.items == []
        assert order.delivery_address == {}

    def test_does_not_mutate_raw_record(self, raw_order):
        original = dict(raw_order)
        decode_order(raw_order)
        assert raw_order == original

    def test_malformed_items_raise(self, raw_order):
        raw_order["items_c"] = "[{broken"
        with pytest.raises(MalformedFieldError):
            decode_order(raw_order)

    def test_items_must_be_objects(self, raw_order):
        raw_order["items_c"] = '["Lamp"]'
        with pytest.raises(FieldShapeError) as exc_info:
            decode_order(raw_order)
        assert exc_info.value.field == "items_c[0]"

    def test_address_must_be_object(self, raw_order):
        raw_order["delivery_address_c"] = '"12 Rustaveli Ave"'
        with pytest.raises(FieldShapeError):
            decode_order(raw_order)

    def test_invalid_scalar_is_a_shape_error(self, raw_order):
        raw_order["total_c"] = "a lot"
        with pytest.raises(FieldShapeError):
            decode_order(raw_order)

    def test_to_record_uses_wire_names(self, raw_order):
        record = decode_order(raw_order).to_record()

        assert record["Id"] == 12
        assert record["items_c"][0]["quantity"] == 2
        assert record["delivery_address_c"]["city"] == "Tbilisi"


class TestDecodeProduct:
    def test_decodes_images_and_specifications(self, raw_product):
        product = decode_product(raw_product)

        assert isinstance(product, Product)
        assert product.images == ["https://img.example.com/a.jpg", "https://img.example.com/b.jpg"]
        assert product.specifications == {"color": "black", "battery": "30h"}
        assert product.brand == "SoundMax"
        assert product.in_stock is True

    def test_images_drop_empty_segments(self):
        assert decode_product({"images_c": "a\n\nb"}).images == ["a", "b"]

    def test_absent_images_and_specifications(self):
        product = decode_product({"Id": 4, "name_c": "Mug"})

        assert product.images == []
        assert product.specifications == {}

    def test_malformed_specifications_raise(self, raw_product):
        raw_product["specifications_c"] = "{color: black}"
        with pytest.raises(MalformedFieldError):
            decode_product(raw_product)

    def test_scalar_of_unexpected_type_is_a_shape_error(self):
        with pytest.raises(FieldShapeError) as exc_info:
            decode_product({"Id": 1, "name_c": 123})

        assert exc_info.value.field == "name_c"


class TestDecodeCategory:
    def test_splits_subcategories(self, raw_category):
        category = decode_category(raw_category)

        assert isinstance(category, Category)
        assert category.subcategories == ["Audio", "Phones", "Laptops"]
        assert category.icon == "Cpu"

    def test_absent_subcategories(self):
        assert decode_category({"Id": 2, "name_c": "Books"}).subcategories == []


class TestEncodeOrderCreate:
    def test_stamps_dates_and_defaults(self, fixed_now):
        payload = encode_order_create(OrderDraft(), fixed_now)

        assert payload == {
            "items_c": "[]",
            "total_c": 0,
            "delivery_address_c": "{}",
            "payment_method_c": "",
            "status_c": "confirmed",
            "order_date_c": "2024-03-01T10:15:00.000Z",
            "estimated_delivery_c": "2024-03-06T10:15:00.000Z",
        }

    def test_encodes_supplied_values(self, fixed_now):
        draft = OrderDraft.model_validate(
            {
                "items_c": [{"name": "Lamp", "quantity": 1}],
                "total_c": 40,
                "delivery_address_c": {"city": "Batumi"},
                "payment_method_c": "cash",
                "status_c": "pending",
            }
        )

        payload = encode_order_create(draft, fixed_now)

        assert json.loads(payload["items_c"]) == [{"name": "Lamp", "quantity": 1}]
        assert json.loads(payload["delivery_address_c"]) == {"city": "Batumi"}
        assert payload["total_c"] == 40
        assert payload["payment_method_c"] == "cash"
        assert payload["status_c"] == "pending"

    def test_empty_strings_fall_back_to_json_defaults(self, fixed_now):
        payload = encode_order_create(OrderDraft(items="", delivery_address=""), fixed_now)

        assert payload["items_c"] == "[]"
        assert payload["delivery_address_c"] == "{}"
        assert json.loads(payload["items_c"]) == []

    def test_round_trip_through_decode(self, fixed_now):
        draft = OrderDraft(items=[{"name": "Lamp", "quantity": 1}], delivery_address={"city": "Batumi", "zip": "6000"})

        order = decode_order(encode_order_create(draft, fixed_now))

        assert order.items == draft.items
        assert order.delivery_address == draft.delivery_address


class TestEncodeOrderUpdate:
    def test_explicit_zero_kept_and_absent_status_omitted(self):
        payload = encode_order_update(5, OrderPatch.model_validate({"total_c": 0, "status_c": None}))

        assert payload == {"Id": 5, "total_c": 0}

    def test_only_supplied_fields_are_sent(self):
        patch = OrderPatch(status="delivered", delivery_address={"city": "Kutaisi"})

        payload = encode_order_update(5, patch)

        assert payload == {"Id": 5, "delivery_address_c": '{"city":"Kutaisi"}', "status_c": "delivered"}

    def test_empty_text_is_treated_as_absent(self):
        assert encode_order_update(5, OrderPatch(payment_method="")) == {"Id": 5}

    def test_pre_encoded_json_passes_through(self):
        payload = encode_order_update(5, OrderPatch(items='[{"name":"Lamp"}]'))
        assert payload["items_c"] == '[{"name":"Lamp"}]'

    def test_empty_string_json_fields_are_not_sent(self):
        payload = encode_order_update(5, OrderPatch(items="", delivery_address="", total=10))

        assert payload == {"Id": 5, "total_c": 10}

    def test_unknown_keys_are_ignored(self):
        assert encode_order_update(5, OrderPatch.model_validate({"coupon_c": "X"})) == {"Id": 5}


class TestEncodeProductCreate:
    def test_defaults(self):
        payload = encode_product_create(ProductDraft())

        assert payload == {
            "name_c": "",
            "description_c": "",
            "price_c": 0,
            "original_price_c": 0,
            "category_c": "",
            "subcategory_c": "",
            "images_c": "",
            "rating_c": 0,
            "review_count_c": 0,
            "in_stock_c": True,
            "specifications_c": "{}",
            "brand_c": "",
        }

    def test_explicit_false_in_stock_is_kept(self):
        assert encode_product_create(ProductDraft(in_stock=False))["in_stock_c"] is False

    def test_images_joined_and_string_passed_through(self):
        assert encode_product_create(ProductDraft(images=["a", "b"]))["images_c"] == "a\nb"
        assert encode_product_create(ProductDraft(images="a\nb"))["images_c"] == "a\nb"

    def test_specifications_serialized(self):
        payload = encode_product_create(ProductDraft(specifications={"color": "red"}))
        assert payload["specifications_c"] == '{"color":"red"}'


class TestEncodeProductUpdate:
    def test_zero_and_false_are_sent(self):
        patch = ProductPatch.model_validate({"price_c": 0, "review_count_c": 0, "in_stock_c": False})

        assert encode_product_update(9, patch) == {
            "Id": 9,
            "price_c": 0,
            "review_count_c": 0,
            "in_stock_c": False,
        }

    def test_images_and_specifications_encoded(self):
        patch = ProductPatch(images=["x.jpg", "y.jpg"], specifications={"size": "L"})

        payload = encode_product_update(9, patch)

        assert payload["images_c"] == "x.jpg\ny.jpg"
        assert payload["specifications_c"] == '{"size":"L"}'

    def test_empty_patch_sends_only_id(self):
        assert encode_product_update(9, ProductPatch()) == {"Id": 9}

    def test_empty_images_string_is_not_sent(self):
        assert encode_product_update(9, ProductPatch(images="", brand="Sony")) == {"Id": 9, "brand_c": "Sony"}


class TestRoundTrip:
    def test_product_images_and_specifications(self):
        draft = ProductDraft(
            name="Desk Lamp",
            images=["https://img.example.com/lamp-1.jpg", "https://img.example.com/lamp-2.jpg"],
            specifications={"wattage": 9, "dimmable": True, "colors": ["white", "black"]},
        )

        product = decode_product(encode_product_create(draft))

        assert product.images == draft.images
        assert product.specifications == draft.specifications
        assert product.name == "Desk Lamp"

    def test_product_patch(self):
        patch = ProductPatch(images=["x.jpg"], specifications={"size": "L"})

        product = decode_product(encode_product_update(9, patch))

        assert product.id == 9
        assert product.images == ["x.jpg"]
        assert product.specifications == {"size": "L"}

    def test_category_subcategories(self):
        subcategories = ["Audio", "Phones", "Laptops"]

        category = decode_category({"Id": 1, "subcategories_c": encode_line_list(subcategories)})

        assert category.subcategories == subcategories
