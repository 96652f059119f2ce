"""Primary substitution catalog.

Entries are JSON-shaped so the same structure can be supplied from a file.
Substitutions are listed best first. Nutrition values are per the serving in
``servingDescription``.
"""

_BUTTER_TBSP = {
    "calories": 102,
    "fat": 11.5,
    "carbs": 0,
    "protein": 0.1,
    "servingDescription": "1 Tbsp",
}
_EGG_LARGE = {
    "calories": 72,
    "fat": 4.8,
    "carbs": 0.4,
    "protein": 6.3,
    "servingDescription": "1 large egg",
}
_MILK_CUP = {
    "calories": 103,
    "fat": 2.4,
    "carbs": 12,
    "protein": 8,
    "servingDescription": "1 cup",
}
_OIL_TBSP = {
    "calories": 119,
    "fat": 13.5,
    "carbs": 0,
    "protein": 0,
    "servingDescription": "1 Tbsp",
}

PRIMARY_CATALOG: list[dict[str, object]] = [
    {
        "originalIngredient": "butter",
        "synonyms": ["unsalted butter", "salted butter"],
        "category": "dairy",
        "substitutions": [
            {
                "substituteIngredient": "margarine",
                "ratio": "1:1",
                "notes": "Similar fat content. Taste/texture slightly different.",
                "nutrition": {
                    "original": _BUTTER_TBSP,
                    "substitute": {
                        "calories": 100,
                        "fat": 11,
                        "carbs": 0,
                        "protein": 0.1,
                        "servingDescription": "1 Tbsp",
                    },
                },
            },
            {
                "substituteIngredient": "coconut oil",
                "ratio": "1:1",
                "notes": "Solid at room temp; adds slight coconut flavor.",
                "nutrition": {
                    "original": _BUTTER_TBSP,
                    "substitute": {
                        "calories": 117,
                        "fat": 13.6,
                        "carbs": 0,
                        "protein": 0,
                        "servingDescription": "1 Tbsp",
                    },
                },
            },
            {
                "substituteIngredient": "olive oil",
                "ratio": "1:0.75",
                "notes": (
                    "Use 3/4 the volume (oil is 100% fat). Good for sautéing, "
                    "less ideal for flaky baking."
                ),
                "nutrition": {"original": _BUTTER_TBSP, "substitute": _OIL_TBSP},
            },
            {
                "substituteIngredient": "applesauce (unsweetened)",
                "ratio": "1:1 (for baking portions only)",
                "notes": "Reduces fat and calories; changes texture to more moist/cakey.",
                "nutrition": {
                    "original": _BUTTER_TBSP,
                    "substitute": {
                        "calories": 68,
                        "fat": 0.2,
                        "carbs": 18,
                        "protein": 0.2,
                        "servingDescription": "1/2 cup",
                    },
                },
            },
        ],
    },
    {
        "originalIngredient": "eggs",
        "synonyms": ["egg"],
        "category": "baking",
        "substitutions": [
            {
                "substituteIngredient": "ground flax + water",
                "ratio": "1 Tbsp flax + 3 Tbsp water = 1 egg",
                "notes": "Mix and rest 5 min. Good binder for baked goods.",
                "nutrition": {
                    "original": _EGG_LARGE,
                    "substitute": {
                        "calories": 55,
                        "fat": 4.3,
                        "carbs": 3,
                        "protein": 1.9,
                        "servingDescription": "1 Tbsp flax + 3 Tbsp water",
                    },
                },
            },
            {
                "substituteIngredient": "unsweetened applesauce",
                "ratio": "1/4 cup = 1 egg (in baking)",
                "notes": "Adds moisture; may change crumb/texture.",
                "nutrition": {
                    "original": _EGG_LARGE,
                    "substitute": {
                        "calories": 25,
                        "fat": 0.1,
                        "carbs": 7,
                        "protein": 0.1,
                        "servingDescription": "1/4 cup",
                    },
                },
            },
            {
                "substituteIngredient": "silken tofu (blended)",
                "ratio": "1/4 cup = 1 egg",
                "notes": "Neutral taste; good binding in dense bakes.",
                "nutrition": {
                    "original": _EGG_LARGE,
                    "substitute": {
                        "calories": 43,
                        "fat": 2.4,
                        "carbs": 1.2,
                        "protein": 4.8,
                        "servingDescription": "1/4 cup",
                    },
                },
            },
        ],
    },
    {
        "originalIngredient": "milk",
        "synonyms": ["whole milk", "2% milk", "dairy milk"],
        "category": "dairy",
        "substitutions": [
            {
                "substituteIngredient": "oat milk (unsweetened)",
                "ratio": "1:1",
                "notes": "Good general replacement; slightly sweeter.",
                "nutrition": {
                    "original": _MILK_CUP,
                    "substitute": {
                        "calories": 90,
                        "fat": 1.5,
                        "carbs": 16,
                        "protein": 2,
                        "servingDescription": "1 cup",
                    },
                },
            },
            {
                "substituteIngredient": "almond milk (unsweetened)",
                "ratio": "1:1",
                "notes": "Lighter body; not great for heavy cream reductions.",
                "nutrition": {
                    "original": _MILK_CUP,
                    "substitute": {
                        "calories": 30,
                        "fat": 2.5,
                        "carbs": 1,
                        "protein": 1,
                        "servingDescription": "1 cup",
                    },
                },
            },
        ],
    },
    {
        "originalIngredient": "heavy cream",
        "synonyms": ["whipping cream"],
        "category": "dairy",
        "substitutions": [
            {
                "substituteIngredient": "evaporated milk",
                "ratio": "1:1",
                "notes": "Good in sauces/soups; not for whipping.",
                "nutrition": {
                    "original": {
                        "calories": 408,
                        "fat": 43,
                        "carbs": 3,
                        "protein": 3,
                        "servingDescription": "1/2 cup",
                    },
                    "substitute": {
                        "calories": 170,
                        "fat": 10,
                        "carbs": 12,
                        "protein": 8,
                        "servingDescription": "1/2 cup",
                    },
                },
            },
            {
                "substituteIngredient": "whole milk + butter",
                "ratio": "3/4 cup milk + 1/4 cup butter = 1 cup cream",
                "notes": "Okay in cooking; won't whip.",
            },
        ],
    },
    {
        "originalIngredient": "sour cream",
        "category": "dairy",
        "substitutions": [
            {
                "substituteIngredient": "plain Greek yogurt",
                "ratio": "1:1",
                "notes": "Tangy with higher protein; great cold or in baking.",
                "nutrition": {
                    "original": {
                        "calories": 240,
                        "fat": 24,
                        "carbs": 6,
                        "protein": 3,
                        "servingDescription": "1/2 cup",
                    },
                    "substitute": {
                        "calories": 80,
                        "fat": 2,
                        "carbs": 4,
                        "protein": 14,
                        "servingDescription": "1/2 cup",
                    },
                },
            },
        ],
    },
    {
        "originalIngredient": "sugar",
        "synonyms": ["granulated sugar", "white sugar"],
        "category": "sweeteners",
        "substitutions": [
            {
                "substituteIngredient": "honey",
                "ratio": "1 cup sugar = 3/4 cup honey (reduce liquid 1/4 cup)",
                "notes": "Adds moisture and flavor; browns faster.",
                "nutrition": {
                    "original": {
                        "calories": 774,
                        "fat": 0,
                        "carbs": 200,
                        "protein": 0,
                        "servingDescription": "1 cup sugar",
                    },
                    "substitute": {
                        "calories": 515,
                        "fat": 0,
                        "carbs": 139,
                        "protein": 0,
                        "servingDescription": "3/4 cup honey",
                    },
                },
            },
            {
                "substituteIngredient": "maple syrup",
                "ratio": "1 cup sugar = 3/4 cup syrup (reduce liquid 3 Tbsp)",
                "notes": "Distinct flavor; moisture increase.",
            },
        ],
    },
    {
        "originalIngredient": "vegetable oil",
        "synonyms": ["canola oil", "neutral oil"],
        "category": "oils",
        "substitutions": [
            {
                "substituteIngredient": "olive oil",
                "ratio": "1:1",
                "notes": "Adds flavor; fine for sautéing and many bakes.",
                "nutrition": {"original": _OIL_TBSP, "substitute": _OIL_TBSP},
            },
            {
                "substituteIngredient": "melted butter",
                "ratio": "1:1",
                "notes": "Adds dairy flavor; different melting/smoke point.",
            },
            {
                "substituteIngredient": "applesauce (unsweetened)",
                "ratio": "1:1 (in baking portions)",
                "notes": "Cuts fat/calories; changes texture.",
            },
        ],
    },
    {
        "originalIngredient": "all-purpose flour",
        "synonyms": ["plain flour", "ap flour"],
        "category": "baking",
        "substitutions": [
            {
                "substituteIngredient": "bread flour",
                "ratio": "1:1",
                "notes": "More protein; chewier texture in cakes and cookies.",
            },
            {
                "substituteIngredient": "whole wheat flour",
                "ratio": "Replace up to half of the flour 1:1",
                "notes": "Denser and nuttier; add 1-2 Tbsp extra liquid per cup.",
                "nutrition": {
                    "original": {
                        "calories": 455,
                        "fat": 1.2,
                        "carbs": 95,
                        "protein": 13,
                        "servingDescription": "1 cup",
                    },
                    "substitute": {
                        "calories": 408,
                        "fat": 3,
                        "carbs": 86,
                        "protein": 16,
                        "servingDescription": "1 cup",
                    },
                },
            },
            {
                "substituteIngredient": "gluten-free 1:1 baking blend",
                "ratio": "1:1",
                "notes": "Use a blend that already contains xanthan gum.",
            },
        ],
    },
    {
        "originalIngredient": "brown sugar",
        "synonyms": ["light brown sugar", "dark brown sugar"],
        "category": "sweeteners",
        "substitutions": [
            {
                "substituteIngredient": "white sugar + molasses",
                "ratio": "1 cup sugar + 1 Tbsp molasses = 1 cup light brown sugar",
                "notes": "Use 2 Tbsp molasses for dark brown sugar.",
            },
            {
                "substituteIngredient": "coconut sugar",
                "ratio": "1:1",
                "notes": "Slightly drier; caramel flavor.",
            },
        ],
    },
    {
        "originalIngredient": "cream cheese",
        "category": "dairy",
        "substitutions": [
            {
                "substituteIngredient": "mascarpone",
                "ratio": "1:1",
                "notes": "Richer and milder; great in frostings.",
            },
            {
                "substituteIngredient": "strained Greek yogurt",
                "ratio": "1:1",
                "notes": "Strain overnight for a thick, tangy spread.",
                "nutrition": {
                    "original": {
                        "calories": 99,
                        "fat": 9.8,
                        "carbs": 1.6,
                        "protein": 1.7,
                        "servingDescription": "2 Tbsp",
                    },
                    "substitute": {
                        "calories": 20,
                        "fat": 0.1,
                        "carbs": 1.2,
                        "protein": 3.5,
                        "servingDescription": "2 Tbsp",
                    },
                },
            },
        ],
    },
    {
        "originalIngredient": "mayonnaise",
        "synonyms": ["mayo"],
        "category": "condiments",
        "substitutions": [
            {
                "substituteIngredient": "plain Greek yogurt",
                "ratio": "1:1",
                "notes": "Tangier; add a squeeze of lemon and a pinch of salt.",
                "nutrition": {
                    "original": {
                        "calories": 94,
                        "fat": 10.3,
                        "carbs": 0.1,
                        "protein": 0.1,
                        "servingDescription": "1 Tbsp",
                    },
                    "substitute": {
                        "calories": 9,
                        "fat": 0,
                        "carbs": 0.6,
                        "protein": 1.5,
                        "servingDescription": "1 Tbsp",
                    },
                },
            },
            {
                "substituteIngredient": "mashed avocado",
                "ratio": "1:1",
                "notes": "Best in sandwiches and dressings; browns quickly.",
            },
        ],
    },
]
