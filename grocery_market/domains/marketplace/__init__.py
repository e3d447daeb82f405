"""
Marketplace Domain

Users, products and orders of the grocery marketplace, with stock reservation
and the order status state machine.
"""
