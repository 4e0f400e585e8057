"""
Menu Seed Data

The fixed list of twelve dishes inserted by POST /seed.
"""

MENU_SEED: list[dict[str, str]] = [
    {
        "food_name": "Margherita Pizza",
        "description": "Mozzarella & basil",
        "price": "$8.99",
        "image": "food1.jpg",
    },
    {
        "food_name": "Veggie Burger",
        "description": "Grilled veggie patty",
        "price": "$6.49",
        "image": "food2.jpg",
    },
    {
        "food_name": "Pasta Alfredo",
        "description": "Creamy Alfredo sauce",
        "price": "$7.99",
        "image": "food3.jpg",
    },
    {
        "food_name": "Grilled Sandwich",
        "description": "Veggies and cheese",
        "price": "$5.49",
        "image": "food4.jpg",
    },
    {
        "food_name": "Caesar Salad",
        "description": "Fresh lettuce, parmesan",
        "price": "$4.99",
        "image": "food5.jpg",
    },
    {
        "food_name": "Chicken Wings",
        "description": "Crispy wings, tangy sauce",
        "price": "$9.49",
        "image": "food6.jpg",
    },
    {
        "food_name": "Beef Taco",
        "description": "Soft taco, seasoned beef",
        "price": "$3.99",
        "image": "food7.jpg",
    },
    {
        "food_name": "Fruit Bowl",
        "description": "Mixed seasonal fruits",
        "price": "$5.29",
        "image": "food8.jpg",
    },
    {
        "food_name": "French Fries",
        "description": "Golden crispy fries",
        "price": "$2.99",
        "image": "food9.jpg",
    },
    {
        "food_name": "Chocolate Muffin",
        "description": "Rich muffin with choco chips",
        "price": "$2.49",
        "image": "food10.jpg",
    },
    {
        "food_name": "Greek Salad",
        "description": "Feta cheese, olives",
        "price": "$4.79",
        "image": "food11.jpg",
    },
    {
        "food_name": "Cheese Pizza",
        "description": "Extra cheesy delight",
        "price": "$9.19",
        "image": "food12.jpg",
    },
]
