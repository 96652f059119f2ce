"""Supplemental substitution catalog keyed by canonical key.

Broader coverage than the primary catalog; nutrition is optional here.
"""

SUPPLEMENTAL_CATALOG: dict[str, list[dict[str, object]]] = {
    "butter": [
        {
            "substituteIngredient": "Olive oil",
            "ratio": "¾ cup oil = 1 cup butter",
            "category": "oils",
            "notes": (
                "Great for sautéing and some baking; flavor changes slightly. "
                "For cookies, chill dough."
            ),
            "nutrition": {
                "original": {
                    "calories": 1628,
                    "fat": 184,
                    "carbs": 1,
                    "protein": 2,
                    "servingDescription": "1 cup butter",
                },
                "substitute": {
                    "calories": 1910,
                    "fat": 216,
                    "carbs": 0,
                    "protein": 0,
                    "servingDescription": "3/4 cup oil",
                },
            },
        },
        {
            "substituteIngredient": "Unsweetened applesauce",
            "ratio": "½ cup applesauce = 1 cup butter (cakes/muffins)",
            "category": "baking",
            "notes": (
                "Reduces fat and calories; texture more moist/denser. "
                "Cut other liquids slightly."
            ),
            "nutrition": {
                "original": {
                    "calories": 1628,
                    "fat": 184,
                    "carbs": 1,
                    "protein": 2,
                    "servingDescription": "1 cup butter",
                },
                "substitute": {
                    "calories": 100,
                    "fat": 0,
                    "carbs": 27,
                    "protein": 0,
                    "servingDescription": "1/2 cup applesauce",
                },
            },
        },
        {
            "substituteIngredient": "Coconut oil",
            "ratio": "1:1 by volume",
            "category": "oils",
            "notes": "Adds coconut aroma; similar solidity at room temp helps structure.",
        },
        {
            "substituteIngredient": "Ghee",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Nuttier flavor and higher smoke point; nearly lactose-free.",
        },
        {
            "substituteIngredient": "Plant-based butter",
            "ratio": "1:1",
            "category": "vegan",
            "notes": "Use stick-style for baking; tub spreads contain more water.",
        },
    ],
    "eggs": [
        {
            "substituteIngredient": "Ground flax + water",
            "ratio": "1 Tbsp ground flax + 3 Tbsp water = 1 egg",
            "category": "vegan",
            "notes": (
                "Let sit 5-10 min to gel; good binder for quick breads, "
                "cookies, pancakes."
            ),
        },
        {
            "substituteIngredient": "Unsweetened applesauce",
            "ratio": "¼ cup applesauce = 1 egg (in cakes/muffins)",
            "category": "baking",
            "notes": "Adds moisture; not suitable for airy foams/meringues.",
        },
        {
            "substituteIngredient": "Aquafaba",
            "ratio": "3 Tbsp chickpea liquid = 1 egg",
            "category": "vegan",
            "notes": "Whips like egg whites; good for meringues and mousses.",
        },
        {
            "substituteIngredient": "Mashed ripe banana",
            "ratio": "¼ cup = 1 egg",
            "category": "baking",
            "notes": "Adds banana flavor; best in muffins and pancakes.",
        },
        {
            "substituteIngredient": "Chia seeds + water",
            "ratio": "1 Tbsp chia + 3 Tbsp water = 1 egg",
            "category": "vegan",
            "notes": "Rest 10 min; leaves visible specks.",
        },
    ],
    "milk": [
        {
            "substituteIngredient": "Soy milk (unsweetened)",
            "ratio": "1:1",
            "category": "dairy-free",
            "notes": "Closest protein content to dairy milk.",
        },
        {
            "substituteIngredient": "Evaporated milk + water",
            "ratio": "½ cup evaporated milk + ½ cup water = 1 cup milk",
            "category": "dairy",
        },
        {
            "substituteIngredient": "Powdered milk + water",
            "ratio": "⅓ cup powder + 1 cup water = 1 cup milk",
            "category": "dairy",
            "notes": "Whisk well and let stand a few minutes.",
        },
    ],
    "heavy cream": [
        {
            "substituteIngredient": "Full-fat coconut cream",
            "ratio": "1:1",
            "category": "dairy-free",
            "notes": "Chill the can first if you need to whip it.",
        },
        {
            "substituteIngredient": "Evaporated milk",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Lower fat; thickens sauces but does not whip.",
        },
    ],
    "half and half": [
        {
            "substituteIngredient": "Whole milk + heavy cream",
            "ratio": "½ cup milk + ½ cup cream = 1 cup",
            "category": "dairy",
        },
        {
            "substituteIngredient": "Whole milk + melted butter",
            "ratio": "⅞ cup milk + 2 Tbsp butter = 1 cup",
            "category": "dairy",
            "notes": "Fine for cooking; will not whip.",
        },
    ],
    "sour cream": [
        {
            "substituteIngredient": "Crème fraîche",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Richer and less tangy; does not curdle when heated.",
        },
        {
            "substituteIngredient": "Plain yogurt",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Thinner than Greek yogurt; drain for dips.",
        },
        {
            "substituteIngredient": "Cashew cream",
            "ratio": "1:1",
            "category": "vegan",
            "notes": "Blend soaked cashews with lemon juice and water.",
        },
    ],
    "buttermilk": [
        {
            "substituteIngredient": "Milk + lemon juice",
            "ratio": "1 cup milk + 1 Tbsp lemon juice, stand 5-10 min",
            "category": "baking",
        },
        {
            "substituteIngredient": "Milk + white vinegar",
            "ratio": "1 cup milk + 1 Tbsp white vinegar, stand 5-10 min",
            "category": "baking",
        },
        {
            "substituteIngredient": "Plain yogurt + milk",
            "ratio": "¾ cup yogurt + ¼ cup milk = 1 cup",
            "category": "baking",
        },
    ],
    "yogurt": [
        {
            "substituteIngredient": "Sour cream",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Richer; works in dips and baking.",
        },
        {
            "substituteIngredient": "Coconut yogurt",
            "ratio": "1:1",
            "category": "dairy-free",
        },
    ],
    "baking powder": [
        {
            "substituteIngredient": "Baking soda + cream of tartar + cornstarch",
            "ratio": "¼ tsp soda + ½ tsp cream of tartar + ¼ tsp cornstarch = 1 tsp",
            "category": "leavening",
            "notes": "Mix just before using.",
        },
        {
            "substituteIngredient": "Baking soda + buttermilk",
            "ratio": "¼ tsp soda + ½ cup buttermilk = 1 tsp (reduce other liquid ½ cup)",
            "category": "leavening",
        },
    ],
    "baking soda": [
        {
            "substituteIngredient": "Baking powder",
            "ratio": "3 tsp baking powder = 1 tsp baking soda",
            "category": "leavening",
            "notes": "Reduce salt in the recipe; flavor may be slightly bitter.",
        },
    ],
    "cream of tartar": [
        {
            "substituteIngredient": "Lemon juice",
            "ratio": "1 tsp lemon juice = ½ tsp cream of tartar",
            "category": "leavening",
            "notes": "For stabilizing egg whites.",
        },
        {
            "substituteIngredient": "White vinegar",
            "ratio": "1 tsp vinegar = ½ tsp cream of tartar",
            "category": "leavening",
        },
    ],
    "self rising flour": [
        {
            "substituteIngredient": "All-purpose flour + baking powder + salt",
            "ratio": "1 cup flour + 1½ tsp baking powder + ¼ tsp salt = 1 cup",
            "category": "baking",
        },
    ],
    "cake flour": [
        {
            "substituteIngredient": "All-purpose flour + cornstarch",
            "ratio": "Remove 2 Tbsp from 1 cup flour, add 2 Tbsp cornstarch, sift",
            "category": "baking",
        },
    ],
    "cornstarch": [
        {
            "substituteIngredient": "All-purpose flour",
            "ratio": "2 Tbsp flour = 1 Tbsp cornstarch",
            "category": "thickeners",
            "notes": "Cook a few minutes longer to remove raw flour taste.",
        },
        {
            "substituteIngredient": "Arrowroot powder",
            "ratio": "1:1",
            "category": "thickeners",
            "notes": "Glossier finish; do not overheat.",
        },
        {
            "substituteIngredient": "Potato starch",
            "ratio": "1:1",
            "category": "thickeners",
        },
    ],
    "sugar": [
        {
            "substituteIngredient": "Coconut sugar",
            "ratio": "1:1",
            "category": "sweeteners",
            "notes": "Caramel notes; baked goods come out darker.",
        },
        {
            "substituteIngredient": "Honey",
            "ratio": "¾ cup honey = 1 cup sugar",
            "category": "sweeteners",
        },
    ],
    "corn syrup": [
        {
            "substituteIngredient": "Sugar + water",
            "ratio": "1¼ cup sugar + ⅓ cup water = 1 cup",
            "category": "sweeteners",
            "notes": "Boil until dissolved and slightly thickened.",
        },
        {
            "substituteIngredient": "Golden syrup",
            "ratio": "1:1",
            "category": "sweeteners",
        },
    ],
    "honey": [
        {
            "substituteIngredient": "Maple syrup",
            "ratio": "1:1",
            "category": "sweeteners",
            "notes": "Thinner; vegan-friendly.",
        },
        {
            "substituteIngredient": "Agave nectar",
            "ratio": "1:1",
            "category": "sweeteners",
        },
    ],
    "maple syrup": [
        {
            "substituteIngredient": "Honey",
            "ratio": "1:1",
            "category": "sweeteners",
            "notes": "Stronger floral flavor; not vegan.",
        },
    ],
    "molasses": [
        {
            "substituteIngredient": "Dark corn syrup",
            "ratio": "1:1",
            "category": "sweeteners",
            "notes": "Milder flavor.",
        },
        {
            "substituteIngredient": "Maple syrup",
            "ratio": "1:1",
            "category": "sweeteners",
        },
    ],
    "unsweetened chocolate": [
        {
            "substituteIngredient": "Cocoa powder + butter",
            "ratio": "3 Tbsp cocoa + 1 Tbsp butter = 1 oz",
            "category": "baking",
        },
        {
            "substituteIngredient": "Cocoa powder + vegetable oil",
            "ratio": "3 Tbsp cocoa + 1 Tbsp oil = 1 oz",
            "category": "baking",
        },
    ],
    "lemon juice": [
        {
            "substituteIngredient": "Lime juice",
            "ratio": "1:1",
            "category": "acids",
        },
        {
            "substituteIngredient": "White wine vinegar",
            "ratio": "½ tsp vinegar = 1 tsp lemon juice",
            "category": "acids",
            "notes": "For acidity only; no citrus aroma.",
        },
    ],
    "white wine": [
        {
            "substituteIngredient": "Chicken broth + white wine vinegar",
            "ratio": "1 cup broth + 1 Tbsp vinegar = 1 cup",
            "category": "liquids",
        },
        {
            "substituteIngredient": "White grape juice",
            "ratio": "1:1",
            "category": "liquids",
            "notes": "Sweeter; add a splash of vinegar.",
        },
    ],
    "red wine": [
        {
            "substituteIngredient": "Beef broth + red wine vinegar",
            "ratio": "1 cup broth + 1 Tbsp vinegar = 1 cup",
            "category": "liquids",
        },
        {
            "substituteIngredient": "Unsweetened cranberry juice",
            "ratio": "1:1",
            "category": "liquids",
        },
    ],
    "chicken broth": [
        {
            "substituteIngredient": "Vegetable broth",
            "ratio": "1:1",
            "category": "liquids",
        },
        {
            "substituteIngredient": "Water + bouillon",
            "ratio": "1 cup water + 1 bouillon cube = 1 cup",
            "category": "liquids",
        },
    ],
    "soy sauce": [
        {
            "substituteIngredient": "Tamari",
            "ratio": "1:1",
            "category": "condiments",
            "notes": "Usually gluten-free; check the label.",
        },
        {
            "substituteIngredient": "Coconut aminos",
            "ratio": "1:1",
            "category": "condiments",
            "notes": "Sweeter and less salty; soy-free.",
        },
    ],
    "garlic": [
        {
            "substituteIngredient": "Garlic powder",
            "ratio": "⅛ tsp = 1 clove",
            "category": "aromatics",
        },
        {
            "substituteIngredient": "Jarred minced garlic",
            "ratio": "½ tsp = 1 clove",
            "category": "aromatics",
        },
    ],
    "shallots": [
        {
            "substituteIngredient": "Yellow onion + garlic",
            "ratio": "½ cup onion + pinch minced garlic = ½ cup shallots",
            "category": "aromatics",
        },
    ],
    "breadcrumbs": [
        {
            "substituteIngredient": "Crushed crackers",
            "ratio": "1:1",
            "category": "coatings",
        },
        {
            "substituteIngredient": "Rolled oats",
            "ratio": "1:1",
            "category": "coatings",
            "notes": "Pulse briefly for meatballs and meatloaf.",
        },
    ],
    "ricotta": [
        {
            "substituteIngredient": "Cottage cheese",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Blend or drain for a smoother texture.",
        },
    ],
    "cream cheese": [
        {
            "substituteIngredient": "Neufchâtel",
            "ratio": "1:1",
            "category": "dairy",
            "notes": "Lower fat, nearly identical texture.",
        },
    ],
    "cornmeal": [
        {
            "substituteIngredient": "Polenta",
            "ratio": "1:1",
            "category": "grains",
            "notes": "Coarser grind; cooks longer.",
        },
    ],
}
