"""Response payloads built from aggregates.

Password hashes never leave this module; JSON-in-text fields are decoded.
"""

from store.shared.text import load_list


def _iso(value):
    return value.isoformat() if value is not None else None


def image_payload(image):
    return {
        "id": str(image.id),
        "url": image.url,
        "alt_text": image.alt_text,
        "is_primary": image.is_primary,
        "display_order": image.display_order,
    }


def product_payload(product):
    images = sorted(product.images, key=lambda i: i.display_order or 0)
    return {
        "id": str(product.id),
        "name": product.name,
        "slug": product.slug,
        "description": product.description,
        "price": product.price,
        "compare_at_price": product.compare_at_price,
        "category": product.category,
        "sizes": product.size_list,
        "colors": product.color_list,
        "tags": product.tag_list,
        "images": [image_payload(i) for i in images],
        "in_stock": product.in_stock,
        "stock_quantity": product.stock_quantity,
        "low_stock_threshold": product.low_stock_threshold,
        "featured": product.featured,
        "rating": {"average": product.rating_average, "count": product.rating_count},
        "seo": {"meta_title": product.seo.meta_title, "meta_description": product.seo.meta_description}
        if product.seo
        else None,
        "created_at": _iso(product.created_at),
        "updated_at": _iso(product.updated_at),
    }


def product_summary(product):
    return {
        "id": str(product.id),
        "name": product.name,
        "price": product.price,
        "images": [i.url for i in sorted(product.images, key=lambda i: i.display_order or 0)],
    }


def address_payload(address):
    return {
        "id": str(address.id),
        "first_name": address.first_name,
        "last_name": address.last_name,
        "address": address.address,
        "apartment": address.apartment,
        "city": address.city,
        "state": address.state,
        "postal_code": address.postal_code,
        "country": address.country,
        "phone": address.phone,
        "is_default": address.is_default,
    }


def user_payload(user):
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "is_admin": user.is_admin,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "phone": user.phone.number if user.phone else None,
        "addresses": [address_payload(a) for a in user.addresses],
        "wishlist": user.wishlist_ids,
        "created_at": _iso(user.created_at),
        "updated_at": _iso(user.updated_at),
        "last_login_at": _iso(user.last_login_at),
    }


def user_summary(user):
    return {"id": str(user.id), "username": user.username, "email": user.email}


def session_payload(user, token):
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "is_admin": user.is_admin,
        "token": token,
    }


def _shipping_payload(address):
    if address is None:
        return None
    return {
        "first_name": address.first_name,
        "last_name": address.last_name,
        "address": address.address,
        "apartment": address.apartment,
        "city": address.city,
        "state": address.state,
        "postal_code": address.postal_code,
        "country": address.country,
        "phone": address.phone,
    }


def order_payload(order, users=None, products=None):
    """Order body; `users`/`products` map ids to aggregates for summaries."""
    users = users or {}
    products = products or {}

    items = []
    for item in order.items:
        product = products.get(str(item.product_id))
        items.append(
            {
                "id": str(item.id),
                "product_id": str(item.product_id),
                "product": product_summary(product) if product is not None else None,
                "name": item.name,
                "quantity": item.quantity,
                "size": item.size,
                "color": item.color,
                "price": item.price,
                "subtotal": item.subtotal,
            }
        )

    user = users.get(str(order.user_id)) if order.user_id else None
    return {
        "id": str(order.id),
        "order_number": order.order_number,
        "user_id": str(order.user_id) if order.user_id else None,
        "user": user_summary(user) if user is not None else None,
        "items": items,
        "subtotal": order.subtotal,
        "total_amount": order.total_amount,
        "shipping_address": _shipping_payload(order.shipping_address),
        "billing_address": _shipping_payload(order.billing_address),
        "payment_method": order.payment_method,
        "payment_status": order.payment_status,
        "order_status": order.order_status,
        "tracking_number": order.tracking_number,
        "customer_notes": order.customer_notes,
        "admin_notes": order.admin_notes,
        "order_date": _iso(order.order_date),
        "updated_at": _iso(order.updated_at),
    }


def review_payload(review):
    return {
        "id": str(review.id),
        "product_id": str(review.product_id),
        "user_id": str(review.user_id),
        "username": review.username,
        "rating": review.rating,
        "title": review.title,
        "body": review.body,
        "verified": review.verified,
        "status": review.status,
        "helpful": {"yes": review.helpful_yes or 0, "no": review.helpful_no or 0},
        "created_at": _iso(review.created_at),
        "updated_at": _iso(review.updated_at),
    }


def category_payload(category):
    return {
        "id": str(category.id),
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "parent_category_id": str(category.parent_category_id) if category.parent_category_id else None,
        "level": category.level,
        "image": category.image,
        "featured": category.featured,
        "display_order": category.display_order,
        "is_active": category.is_active,
        "meta_title": category.meta_title,
        "meta_description": category.meta_description,
        "created_at": _iso(category.created_at),
        "updated_at": _iso(category.updated_at),
    }


def coupon_payload(coupon):
    return {
        "id": str(coupon.id),
        "code": coupon.code,
        "description": coupon.description,
        "discount_type": coupon.discount_type,
        "value": coupon.value,
        "min_purchase": coupon.min_purchase,
        "max_discount": coupon.max_discount,
        "usage_limit": coupon.usage_limit,
        "usage_count": coupon.usage_count,
        "per_user_limit": coupon.per_user_limit,
        "products": load_list(coupon.products),
        "categories": load_list(coupon.categories),
        "excluded_products": load_list(coupon.excluded_products),
        "start_date": _iso(coupon.start_date),
        "end_date": _iso(coupon.end_date),
        "active": coupon.active,
        "created_at": _iso(coupon.created_at),
        "updated_at": _iso(coupon.updated_at),
    }
