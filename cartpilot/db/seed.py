"""Bundled store and product catalogs.

Both lists are in insertion order, which the product search preserves and the nearby
store search uses only as a final tie-breaker after distance and id.
"""
from __future__ import annotations

from cartpilot.schemas.products import Product
from cartpilot.schemas.stores import Store

_STORE_ROWS = [
    # Manchester
    {
        "id": "tesco-manchester-arndale",
        "name": "Tesco Manchester Arndale",
        "chain": "Tesco",
        "address": "49 High Street, Manchester",
        "postcode": "M4 3AH",
        "latitude": 53.4825,
        "longitude": -2.2448,
        "phone": "0345 677 9648",
        "opening_hours": "Mon-Sat: 8am-10pm, Sun: 11am-5pm",
        "store_type": "Metro",
    },
    {
        "id": "sainsburys-manchester-regent",
        "name": "Sainsburys Manchester Regent Road",
        "chain": "Sainsburys",
        "address": "Regent Road, Manchester",
        "postcode": "M5 4LZ",
        "latitude": 53.4746,
        "longitude": -2.2697,
        "phone": "0161 834 8020",
        "opening_hours": "Mon-Sat: 7am-10pm, Sun: 10am-4pm",
        "store_type": "Superstore",
    },
    {
        "id": "asda-manchester-eastlands",
        "name": "ASDA Manchester Eastlands",
        "chain": "ASDA",
        "address": "Eastlands, Manchester",
        "postcode": "M11 3BS",
        "latitude": 53.4831,
        "longitude": -2.2004,
        "phone": "0161 273 3500",
        "opening_hours": "24 hours",
        "store_type": "Supercentre",
    },
    {
        "id": "morrisons-manchester-cheetham-hill",
        "name": "Morrisons Manchester Cheetham Hill",
        "chain": "Morrisons",
        "address": "Cheetham Hill Road, Manchester",
        "postcode": "M8 8EP",
        "latitude": 53.5067,
        "longitude": -2.2364,
        "phone": "0161 205 4500",
        "opening_hours": "Mon-Sat: 8am-10pm, Sun: 10am-4pm",
        "store_type": "Supermarket",
    },
    {
        "id": "aldi-manchester-piccadilly",
        "name": "Aldi Manchester Piccadilly",
        "chain": "Aldi",
        "address": "Piccadilly Gardens, Manchester",
        "postcode": "M1 1RG",
        "latitude": 53.4794,
        "longitude": -2.2364,
        "phone": "0161 833 7890",
        "opening_hours": "Mon-Sat: 8am-10pm, Sun: 10am-4pm",
        "store_type": "Store",
    },
    {
        "id": "lidl-manchester-oxford-road",
        "name": "Lidl Manchester Oxford Road",
        "chain": "Lidl",
        "address": "Oxford Road, Manchester",
        "postcode": "M13 9RN",
        "latitude": 53.4722,
        "longitude": -2.2324,
        "phone": "0161 273 8900",
        "opening_hours": "Mon-Sat: 8am-9pm, Sun: 10am-4pm",
        "store_type": "Store",
    },
    # London
    {
        "id": "tesco-london-oxford-street",
        "name": "Tesco London Oxford Street",
        "chain": "Tesco",
        "address": "92-98 Oxford Street, London",
        "postcode": "W1D 1LL",
        "latitude": 51.5165,
        "longitude": -0.1364,
        "phone": "0345 677 9685",
        "opening_hours": "Mon-Sat: 7am-midnight, Sun: 11:30am-6pm",
        "store_type": "Metro",
    },
    {
        "id": "sainsburys-london-holborn-circus",
        "name": "Sainsburys London Holborn Circus",
        "chain": "Sainsburys",
        "address": "Holborn Circus, London",
        "postcode": "EC1N 2HA",
        "latitude": 51.5188,
        "longitude": -0.1067,
        "phone": "020 7405 4287",
        "opening_hours": "Mon-Fri: 7am-10pm, Sat: 8am-10pm, Sun: 11am-5pm",
        "store_type": "Local",
    },
    {
        "id": "asda-london-park-royal",
        "name": "ASDA London Park Royal",
        "chain": "ASDA",
        "address": "Old Oak Common Lane, London",
        "postcode": "NW10 6GA",
        "latitude": 51.5276,
        "longitude": -0.2661,
        "phone": "020 8965 9300",
        "opening_hours": "24 hours",
        "store_type": "Supercentre",
    },
    {
        "id": "waitrose-london-canary-wharf",
        "name": "Waitrose London Canary Wharf",
        "chain": "Waitrose",
        "address": "Cabot Place, London",
        "postcode": "E14 4QT",
        "latitude": 51.5055,
        "longitude": -0.0196,
        "phone": "020 7719 0300",
        "opening_hours": "Mon-Fri: 7am-10pm, Sat: 8am-9pm, Sun: 11am-6pm",
        "store_type": "Supermarket",
    },
    # Birmingham
    {
        "id": "tesco-birmingham-new-street",
        "name": "Tesco Birmingham New Street",
        "chain": "Tesco",
        "address": "New Street, Birmingham",
        "postcode": "B2 4QA",
        "latitude": 52.4796,
        "longitude": -1.8991,
        "phone": "0345 677 9712",
        "opening_hours": "Mon-Sat: 6am-midnight, Sun: 11am-6pm",
        "store_type": "Metro",
    },
    {
        "id": "asda-birmingham-queslett",
        "name": "ASDA Birmingham Queslett",
        "chain": "ASDA",
        "address": "Queslett Road, Birmingham",
        "postcode": "B43 7ET",
        "latitude": 52.5430,
        "longitude": -1.9650,
        "phone": "0121 358 5600",
        "opening_hours": "24 hours",
        "store_type": "Supercentre",
    },
    # Leeds
    {
        "id": "morrisons-leeds-city-centre",
        "name": "Morrisons Leeds City Centre",
        "chain": "Morrisons",
        "address": "Merrion Street, Leeds",
        "postcode": "LS2 8NG",
        "latitude": 53.7987,
        "longitude": -1.5406,
        "phone": "0113 242 8400",
        "opening_hours": "Mon-Sat: 7am-10pm, Sun: 10am-4pm",
        "store_type": "Market Street",
    },
    # Glasgow
    {
        "id": "tesco-glasgow-forge",
        "name": "Tesco Glasgow Forge",
        "chain": "Tesco",
        "address": "Parkhead Forge, Glasgow",
        "postcode": "G31 4EB",
        "latitude": 55.8426,
        "longitude": -4.1981,
        "phone": "0345 677 9823",
        "opening_hours": "Mon-Sat: 6am-midnight, Sun: 9am-8pm",
        "store_type": "Extra",
    },
    # Bristol
    {
        "id": "sainsburys-bristol-broadmead",
        "name": "Sainsburys Bristol Broadmead",
        "chain": "Sainsburys",
        "address": "Broadmead, Bristol",
        "postcode": "BS1 3XE",
        "latitude": 51.4600,
        "longitude": -2.5836,
        "phone": "0117 922 6300",
        "opening_hours": "Mon-Sat: 8am-9pm, Sun: 11am-5pm",
        "store_type": "Local",
    },
    # Edinburgh
    {
        "id": "tesco-edinburgh-princes-street",
        "name": "Tesco Edinburgh Princes Street",
        "chain": "Tesco",
        "address": "Princes Street, Edinburgh",
        "postcode": "EH2 2BY",
        "latitude": 55.9533,
        "longitude": -3.1883,
        "phone": "0345 677 9891",
        "opening_hours": "Mon-Sat: 7am-10pm, Sun: 10am-8pm",
        "store_type": "Metro",
    },
    # Liverpool
    {
        "id": "asda-liverpool-hunts-cross",
        "name": "ASDA Liverpool Hunts Cross",
        "chain": "ASDA",
        "address": "Speke Hall Avenue, Liverpool",
        "postcode": "L24 9GB",
        "latitude": 53.3648,
        "longitude": -2.8446,
        "phone": "0151 448 1300",
        "opening_hours": "24 hours",
        "store_type": "Supercentre",
    },
]

# (id, name, synonyms, aisle, section, price)
_PRODUCT_ROWS = [
    ("1", "Whole Milk", ["milk", "full fat milk"], 3, "Dairy", 1.25),
    ("2", "Semi Skimmed Milk", ["milk", "semi milk"], 3, "Dairy", 1.20),
    ("3", "White Bread", ["bread", "loaf"], 1, "Bakery", 0.85),
    ("4", "Brown Bread", ["bread", "wholemeal"], 1, "Bakery", 0.95),
    ("5", "Bananas", ["banana", "fruit"], 7, "Fresh Produce", 1.10),
    ("6", "Apples", ["apple", "fruit"], 7, "Fresh Produce", 1.50),
    ("7", "Chicken Breast", ["chicken", "meat"], 5, "Meat & Poultry", 4.50),
    ("8", "Cheddar Cheese", ["cheese", "cheddar"], 3, "Dairy", 2.75),
    ("9", "Eggs", ["egg", "free range"], 3, "Dairy", 2.20),
    ("10", "Pasta", ["spaghetti", "noodles"], 2, "Dry Goods", 1.00),
    ("11", "Rice", ["basmati", "long grain"], 2, "Dry Goods", 2.50),
    ("12", "Tomatoes", ["tomato", "cherry tomatoes"], 7, "Fresh Produce", 1.80),
    ("13", "Carrots", ["carrot", "veg"], 7, "Fresh Produce", 0.70),
    ("14", "Yoghurt", ["yogurt", "greek yogurt"], 3, "Dairy", 1.40),
    ("15", "Cereal", ["cornflakes", "breakfast"], 4, "Breakfast", 3.25),
    ("16", "Orange Juice", ["juice", "oj"], 6, "Drinks", 2.00),
    ("17", "Tea Bags", ["tea", "english breakfast"], 4, "Hot Drinks", 2.80),
    ("18", "Biscuits", ["cookies", "digestives"], 4, "Snacks", 1.60),
    ("19", "Washing Up Liquid", ["fairy liquid", "dish soap"], 8, "Cleaning", 1.95),
    ("20", "Toilet Roll", ["loo roll", "tissue"], 8, "Household", 4.50),
]

UK_SUPERMARKETS: list[Store] = [Store(**row) for row in _STORE_ROWS]

PRODUCT_CATALOG: list[Product] = [
    Product(id=pid, name=name, category=section, synonyms=synonyms, aisle=aisle, price=price)
    for pid, name, synonyms, aisle, section, price in _PRODUCT_ROWS
]


__all__ = ["UK_SUPERMARKETS", "PRODUCT_CATALOG"]
