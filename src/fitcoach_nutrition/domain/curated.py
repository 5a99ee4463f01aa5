"""Curated catalogue of popular foods with FoodData Central ids."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CuratedFood:
    """Popular food with alternative names used for lookup."""

    fdc_id: int
    name: str
    category: str
    common_names: tuple[str, ...]


CURATED_FOODS: tuple[CuratedFood, ...] = (
    # Proteins
    CuratedFood(
        173304,
        "Chicken, broilers or fryers, breast, meat only, cooked, roasted",
        "proteins",
        ("Chicken breast", "Pollo", "Chicken"),
    ),
    CuratedFood(
        174292,
        'Beef, round, eye of round, separable lean only, trimmed to 0" fat, '
        "choice, cooked, roasted",
        "proteins",
        ("Beef", "Res", "Beef roast"),
    ),
    CuratedFood(
        175167,
        "Fish, salmon, Atlantic, farmed, cooked, dry heat",
        "proteins",
        ("Salmon", "Pescado", "Fish"),
    ),
    CuratedFood(
        173423,
        "Pork, fresh, loin, center cut (chops), bone-in, separable lean only, "
        "cooked, broiled",
        "proteins",
        ("Pork", "Cerdo", "Pork chop"),
    ),
    CuratedFood(
        321355,
        "Egg, whole, cooked, hard-boiled",
        "proteins",
        ("Egg", "Huevo", "Hard boiled egg"),
    ),
    CuratedFood(
        175177,
        "Fish, tuna, light, canned in water, drained solids",
        "proteins",
        ("Tuna", "Atún", "Canned tuna"),
    ),
    # Carbohydrates
    CuratedFood(
        169704,
        "Rice, white, long-grain, regular, cooked",
        "carbohydrates",
        ("White rice", "Arroz", "Rice"),
    ),
    CuratedFood(
        168878,
        "Bread, whole-wheat, commercially prepared",
        "carbohydrates",
        ("Whole wheat bread", "Pan integral", "Bread"),
    ),
    CuratedFood(
        168916,
        "Pasta, cooked, enriched, without added salt",
        "carbohydrates",
        ("Pasta", "Noodles", "Spaghetti"),
    ),
    CuratedFood(
        169998,
        "Potatoes, flesh and skin, raw",
        "carbohydrates",
        ("Potato", "Papa", "Patata"),
    ),
    CuratedFood(168927, "Oats", "carbohydrates", ("Oats", "Avena", "Oatmeal")),
    CuratedFood(
        170066,
        "Sweet potato, raw",
        "carbohydrates",
        ("Sweet potato", "Batata", "Camote"),
    ),
    # Fruits
    CuratedFood(171688, "Apples, raw, with skin", "fruits", ("Apple", "Manzana")),
    CuratedFood(171713, "Bananas, raw", "fruits", ("Banana", "Plátano", "Banano")),
    CuratedFood(167765, "Orange, raw", "fruits", ("Orange", "Naranja")),
    CuratedFood(
        167757,
        "Grapes, red or green (European type, such as Thompson seedless), raw",
        "fruits",
        ("Grapes", "Uvas"),
    ),
    CuratedFood(167762, "Strawberries, raw", "fruits", ("Strawberries", "Fresas")),
    CuratedFood(171716, "Blueberries, raw", "fruits", ("Blueberries", "Arándanos")),
    # Vegetables
    CuratedFood(170379, "Broccoli, raw", "vegetables", ("Broccoli", "Brócoli")),
    CuratedFood(169967, "Spinach, raw", "vegetables", ("Spinach", "Espinacas")),
    CuratedFood(170393, "Carrots, raw", "vegetables", ("Carrots", "Zanahorias")),
    CuratedFood(
        170457,
        "Tomatoes, red, ripe, raw, year round average",
        "vegetables",
        ("Tomatoes", "Tomates"),
    ),
    CuratedFood(169260, "Onions, raw", "vegetables", ("Onions", "Cebollas")),
    CuratedFood(
        170417,
        "Lettuce, cos or romaine, raw",
        "vegetables",
        ("Lettuce", "Lechuga"),
    ),
    # Dairy
    CuratedFood(
        171256,
        "Milk, reduced fat, fluid, 2% milkfat, with added vitamin A and vitamin D",
        "dairy",
        ("Milk 2%", "Leche", "Milk"),
    ),
    CuratedFood(
        173441, "Cheese, cheddar", "dairy", ("Cheddar cheese", "Queso", "Cheese")
    ),
    CuratedFood(171284, "Yogurt, plain, whole milk", "dairy", ("Yogurt", "Yogur")),
    # Fats
    CuratedFood(
        171705,
        "Avocados, raw, all commercial varieties",
        "fats",
        ("Avocado", "Aguacate", "Palta"),
    ),
    CuratedFood(170178, "Nuts, almonds", "fats", ("Almonds", "Almendras")),
    CuratedFood(
        170187,
        "Oil, olive, salad or cooking",
        "fats",
        ("Olive oil", "Aceite de oliva"),
    ),
    # Legumes
    CuratedFood(
        173757,
        "Beans, black, mature seeds, cooked, boiled, without salt",
        "legumes",
        ("Black beans", "Frijoles negros"),
    ),
    CuratedFood(
        174270,
        "Lentils, mature seeds, cooked, boiled, without salt",
        "legumes",
        ("Lentils", "Lentejas"),
    ),
    CuratedFood(
        174308,
        "Chickpeas (garbanzo beans, bengal gram), mature seeds, cooked, boiled, "
        "without salt",
        "legumes",
        ("Chickpeas", "Garbanzos"),
    ),
)


def search_curated_foods(query: str | None) -> list[CuratedFood]:
    """Return curated foods whose name or common names contain the query."""
    if query is None or not query.strip():
        return list(CURATED_FOODS)
    term = query.strip().lower()
    return [
        food
        for food in CURATED_FOODS
        if term in food.name.lower()
        or any(term in name.lower() for name in food.common_names)
    ]
