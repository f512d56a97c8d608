# Routes package init
"""
Rocks API — Routes Package
============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - root.py:        GET /                        (greeting)
    - rocks.py:       GET /rocks                   (whole collection, JSON)
                      GET /rocks/{index}           (one rock, text)
                      GET /rocks/{index}/{name}    (path parameter echo, JSON)
    - calculator.py:  GET /calculator/{operator}   (arithmetic summary, text)

Design Principle:
    Routes are THIN — they extract path/query values, call a service and
    choose the response type. Everything else lives in services/.
"""
