"""Shipping service: shipping quotes and order shipment."""
