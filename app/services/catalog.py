# app/services/catalog.py
"""
Smart Fitness Planner API - Exercise and Meal Catalogs.

Static, goal-keyed lists of exercises and meal options from which each day's
plan is sampled. Loaded once at import and never mutated.

Timed exercises carry ``duration_minutes`` (cardio, yoga, stretching) or
``duration_seconds`` (plank holds).
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from app.enums import Goal, DayOfWeek, MealType


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise; embedded by value inside a plan. Unset durations are omitted."""
    name: str
    sets: int
    reps: int
    instructions: str
    duration_minutes: Optional[int] = None
    duration_seconds: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class MealOption:
    """A catalog meal with a fixed calorie value."""
    name: str
    calories: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


EXERCISES: Mapping[Goal, Tuple[Exercise, ...]] = MappingProxyType({
    Goal.WEIGHT_LOSS: (
        Exercise("Cardio: Running", 1, 1, "Run at moderate pace for 30 minutes", 30),
        Exercise("Jumping Jacks", 3, 20, "Perform jumping jacks with full arm extension"),
        Exercise("Burpees", 3, 10, "Full burpee with push-up and jump"),
        Exercise("Mountain Climbers", 3, 20, "Alternate legs quickly in plank position"),
        Exercise("High Knees", 3, 30, "Run in place bringing knees to chest"),
        Exercise("Plank", 3, 1, "Hold plank position for 60 seconds", duration_seconds=60),
        Exercise("Squats", 3, 15, "Bodyweight squats with proper form"),
        Exercise("Lunges", 3, 12, "Alternating forward lunges"),
    ),
    Goal.MUSCLE_GAIN: (
        Exercise("Push-ups", 4, 12, "Standard push-ups, full range of motion"),
        Exercise("Pull-ups", 4, 8, "If unavailable, use resistance bands or lat pulldowns"),
        Exercise("Squats", 4, 12, "Bodyweight or weighted squats"),
        Exercise("Deadlifts", 3, 10, "Use proper form, start with bodyweight or light weights"),
        Exercise("Bench Press", 4, 10, "Use dumbbells or barbell if available"),
        Exercise("Shoulder Press", 3, 12, "Overhead press with dumbbells or resistance bands"),
        Exercise("Bicep Curls", 3, 12, "Dumbbell or resistance band curls"),
        Exercise("Tricep Dips", 3, 12, "Use chair or bench for support"),
        Exercise("Plank", 3, 1, "Hold for 45 seconds", duration_seconds=45),
        Exercise("Leg Raises", 3, 15, "Lying leg raises for core strength"),
    ),
    Goal.MAINTENANCE: (
        Exercise("Cardio: Brisk Walk", 1, 1, "Walk at brisk pace for 30 minutes", 30),
        Exercise("Push-ups", 3, 10, "Standard push-ups"),
        Exercise("Squats", 3, 12, "Bodyweight squats"),
        Exercise("Plank", 3, 1, "Hold for 45 seconds", duration_seconds=45),
        Exercise("Yoga Flow", 1, 1, "20-minute yoga session focusing on flexibility", 20),
        Exercise("Lunges", 3, 10, "Alternating lunges"),
        Exercise("Stretching", 1, 1, "Full body stretching routine for 15 minutes", 15),
    ),
})

# Exercises per day. Sunday is always the light day.
_FULL_WEEK = {
    DayOfWeek.MONDAY: 6,
    DayOfWeek.TUESDAY: 6,
    DayOfWeek.WEDNESDAY: 5,
    DayOfWeek.THURSDAY: 6,
    DayOfWeek.FRIDAY: 6,
    DayOfWeek.SATURDAY: 5,
    DayOfWeek.SUNDAY: 3,
}
_CARDIO_WEEK = {
    DayOfWeek.MONDAY: 5,
    DayOfWeek.TUESDAY: 5,
    DayOfWeek.WEDNESDAY: 4,
    DayOfWeek.THURSDAY: 5,
    DayOfWeek.FRIDAY: 5,
    DayOfWeek.SATURDAY: 4,
    DayOfWeek.SUNDAY: 3,
}
DAILY_EXERCISE_COUNTS: Mapping[Goal, Mapping[DayOfWeek, int]] = MappingProxyType({
    Goal.WEIGHT_LOSS: MappingProxyType(_CARDIO_WEEK),
    Goal.MUSCLE_GAIN: MappingProxyType(_FULL_WEEK),
    Goal.MAINTENANCE: MappingProxyType(_FULL_WEEK),
})


MEALS: Mapping[Goal, Mapping[MealType, Tuple[MealOption, ...]]] = MappingProxyType({
    Goal.WEIGHT_LOSS: MappingProxyType({
        MealType.BREAKFAST: (
            MealOption("Greek Yogurt with Berries", 250, "1 cup Greek yogurt, 1/2 cup mixed berries, 1 tbsp honey"),
            MealOption("Oatmeal with Fruits", 280, "1 cup cooked oatmeal, 1/2 banana, 1/4 cup blueberries, 1 tbsp almond butter"),
            MealOption("Scrambled Eggs with Vegetables", 270, "2 eggs, spinach, tomatoes, mushrooms, whole grain toast"),
            MealOption("Smoothie Bowl", 260, "Blended fruits, Greek yogurt, granola, chia seeds"),
        ),
        MealType.LUNCH: (
            MealOption("Grilled Chicken Salad", 350, "Grilled chicken breast, mixed greens, vegetables, light dressing"),
            MealOption("Quinoa Bowl", 380, "Quinoa, roasted vegetables, chickpeas, tahini dressing"),
            MealOption("Turkey Wrap", 340, "Whole grain wrap, turkey, vegetables, hummus"),
            MealOption("Vegetable Soup with Protein", 360, "Lentil soup, grilled chicken, whole grain bread"),
        ),
        MealType.DINNER: (
            MealOption("Baked Fish with Vegetables", 320, "White fish, roasted vegetables, quinoa"),
            MealOption("Turkey Meatballs with Zoodles", 340, "Lean turkey meatballs, zucchini noodles, marinara"),
            MealOption("Chicken and Vegetable Skewers", 330, "Grilled chicken, bell peppers, onions, side salad"),
            MealOption("Lentil Curry", 310, "Lentil curry, brown rice, vegetables"),
        ),
        MealType.SNACKS: (
            MealOption("Apple with Almond Butter", 150, "1 medium apple, 1 tbsp almond butter"),
            MealOption("Greek Yogurt", 120, "1 cup Greek yogurt with berries"),
            MealOption("Vegetable Sticks with Hummus", 130, "Carrots, celery, bell peppers with hummus"),
            MealOption("Protein Smoothie", 140, "Protein powder, almond milk, berries"),
        ),
    }),
    Goal.MUSCLE_GAIN: MappingProxyType({
        MealType.BREAKFAST: (
            MealOption("Protein Pancakes", 450, "Protein powder pancakes with banana and berries, 2 eggs"),
            MealOption("Egg Scramble with Toast", 480, "3 eggs, whole grain toast, avocado, turkey bacon"),
            MealOption("Oatmeal with Protein", 470, "Oatmeal, protein powder, nuts, fruits"),
            MealOption("Breakfast Burrito", 460, "Whole grain tortilla, eggs, black beans, cheese, vegetables"),
        ),
        MealType.LUNCH: (
            MealOption("Chicken and Rice Bowl", 550, "Grilled chicken, brown rice, vegetables, sauce"),
            MealOption("Beef Stir Fry", 580, "Lean beef, vegetables, brown rice or noodles"),
            MealOption("Salmon with Sweet Potato", 560, "Grilled salmon, roasted sweet potato, vegetables"),
            MealOption("Turkey and Quinoa", 540, "Ground turkey, quinoa, vegetables, cheese"),
        ),
        MealType.DINNER: (
            MealOption("Steak with Potatoes", 520, "Lean steak, roasted potatoes, vegetables"),
            MealOption("Chicken Pasta", 540, "Grilled chicken, whole grain pasta, vegetables, sauce"),
            MealOption("Salmon with Rice", 510, "Grilled salmon, brown rice, vegetables, avocado"),
            MealOption("Pork Tenderloin", 530, "Pork tenderloin, sweet potato, vegetables"),
        ),
        MealType.SNACKS: (
            MealOption("Protein Shake", 200, "Protein powder, banana, milk, peanut butter"),
            MealOption("Trail Mix", 180, "Nuts, seeds, dried fruits"),
            MealOption("Greek Yogurt with Granola", 190, "Greek yogurt, granola, fruits"),
            MealOption("Protein Bar", 200, "High protein bar with nuts"),
        ),
    }),
    Goal.MAINTENANCE: MappingProxyType({
        MealType.BREAKFAST: (
            MealOption("Avocado Toast with Eggs", 350, "Whole grain toast, avocado, 2 poached eggs"),
            MealOption("Yogurt Parfait", 340, "Greek yogurt, granola, mixed fruits, nuts"),
            MealOption("Breakfast Bowl", 360, "Quinoa, eggs, vegetables, feta cheese"),
            MealOption("French Toast", 350, "Whole grain bread, eggs, berries, maple syrup"),
        ),
        MealType.LUNCH: (
            MealOption("Mediterranean Bowl", 450, "Quinoa, grilled chicken, vegetables, feta, olives"),
            MealOption("Pasta with Protein", 440, "Whole grain pasta, lean protein, vegetables, light sauce"),
            MealOption("Sandwich and Salad", 460, "Whole grain sandwich, side salad, protein"),
            MealOption("Buddha Bowl", 450, "Grains, protein, vegetables, healthy fats"),
        ),
        MealType.DINNER: (
            MealOption("Grilled Chicken with Sides", 420, "Grilled chicken, roasted vegetables, whole grain"),
            MealOption("Fish Tacos", 410, "Grilled fish, whole grain tortillas, vegetables, salsa"),
            MealOption("Stir Fry", 430, "Protein, vegetables, brown rice or noodles"),
            MealOption("Pizza Night", 420, "Thin crust pizza, vegetables, lean protein"),
        ),
        MealType.SNACKS: (
            MealOption("Mixed Nuts", 160, "Almonds, walnuts, cashews"),
            MealOption("Fruit and Cheese", 150, "Apple slices with cheese"),
            MealOption("Rice Cakes with Toppings", 140, "Rice cakes, avocado, or nut butter"),
            MealOption("Smoothie", 150, "Fruits, yogurt, milk"),
        ),
    }),
})
