"""Spelling variants grouped under their canonical ingredient key."""

ALIASES: dict[str, list[str]] = {
    "milk": [
        "whole milk",
        "2% milk",
        "1% milk",
        "skim milk",
        "nonfat milk",
        "non-fat milk",
        "low-fat milk",
        "reduced fat milk",
        "dairy milk",
        "cow's milk",
    ],
    "eggs": ["egg", "whole egg", "whole eggs", "large egg", "large eggs"],
    "butter": ["unsalted butter", "salted butter", "sweet cream butter"],
    "heavy cream": ["whipping cream", "heavy whipping cream", "double cream"],
    "half and half": ["half & half", "half-n-half"],
    "sour cream": ["soured cream"],
    "buttermilk": ["cultured buttermilk"],
    "yogurt": ["yoghurt", "plain yogurt", "natural yogurt"],
    "cream cheese": ["soft cream cheese"],
    "ricotta": ["ricotta cheese"],
    "sugar": ["granulated sugar", "white sugar", "caster sugar", "cane sugar"],
    "brown sugar": ["light brown sugar", "dark brown sugar", "packed brown sugar"],
    "honey": ["raw honey"],
    "maple syrup": ["pure maple syrup"],
    "corn syrup": ["light corn syrup"],
    "unsweetened chocolate": [
        "baking chocolate",
        "bitter chocolate",
        "unsweetened baking chocolate",
    ],
    "all-purpose flour": ["flour", "plain flour", "ap flour", "white flour"],
    "self-rising flour": ["self-raising flour"],
    "cornstarch": ["corn starch", "cornflour"],
    "baking soda": ["bicarbonate of soda", "bicarb soda", "sodium bicarbonate"],
    "vegetable oil": ["canola oil", "neutral oil", "sunflower oil", "rapeseed oil"],
    "mayonnaise": ["mayo"],
    "breadcrumbs": ["bread crumbs", "dried breadcrumbs", "dry bread crumbs"],
    "garlic": ["garlic clove", "garlic cloves", "fresh garlic"],
    "shallots": ["shallot"],
    "soy sauce": ["shoyu", "light soy sauce"],
    "lemon juice": ["fresh lemon juice"],
    "white wine": ["dry white wine"],
    "red wine": ["dry red wine"],
    "chicken broth": ["chicken stock"],
}
