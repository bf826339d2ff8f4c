import random
import unittest

from fastapi.testclient import TestClient

from nutriplan.api.api_run import app
from nutriplan.api.routes.plans import get_plan_composer
from nutriplan.domain.Meal_Plan import WorkoutRecommendation
from nutriplan.infra.Menu_Provider import normalize_menu
from nutriplan.logic.planning.composer import PlanComposer

MENU = normalize_menu({
    "meals": [
        {"id": 1, "slot": 1, "title": "Mock Breakfast"},
        {"id": 2, "slot": 2, "title": "Mock Lunch"},
        {"id": 3, "slot": 3, "title": "Mock Dinner"},
    ],
    "nutrients": {"calories": 2000, "protein": 100, "fat": 70, "carbohydrates": 210},
})


class StubMenuProvider:
    async def fetch_menu(self, dietary_preference, target_calories):
        return MENU

    async def fetch_ingredients(self, meal_id):
        return [{"amount": 100, "unit": "g", "name": f"item {meal_id}"}]


class StubWorkoutProvider:
    async def fetch_workouts(self, calories, dietary_preference):
        return (
            WorkoutRecommendation(workout_type="cardio", duration_minutes=30, intensity="moderate",
                                  estimated_calories_burned=300, description="Run"),
            WorkoutRecommendation(workout_type="strength", duration_minutes=25, intensity="moderate",
                                  estimated_calories_burned=200, description="Lift"),
        )


async def _stub_composer():
    yield PlanComposer(StubMenuProvider(), StubWorkoutProvider(), rng=random.Random(7))


class TestMealPlanAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        app.dependency_overrides[get_plan_composer] = _stub_composer
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls):
        app.dependency_overrides.clear()

    def test_plan_without_workout(self):
        resp = self.client.post('/nutrition/meal-plans',
                                json={'calories': 2000, 'dietaryPreference': 'balanced', 'includeWorkout': False})
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()
        self.assertEqual(len(data['meals']), 4)
        self.assertEqual(data['totalCalories'], 2000)
        self.assertEqual(data['workoutCaloriesBurned'], 0)
        self.assertNotIn('workoutRecommendations', data)
        self.assertEqual(data['nutrients']['protein'], 100)
        self.assertEqual([m['calories'] for m in data['meals']], [600, 600, 600, 200])
        self.assertEqual(data['meals'][0]['ingredients'], ['100 g item 1'])

    def test_plan_with_workout(self):
        resp = self.client.post('/nutrition/meal-plans',
                                json={'calories': 2500, 'dietaryPreference': 'high_protein', 'includeWorkout': True})
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()
        self.assertEqual(data['workoutCaloriesBurned'], 500)
        self.assertAlmostEqual(data['totalCalories'], 2900)
        self.assertEqual(len(data['workoutRecommendations']), 2)
        self.assertEqual(data['workoutRecommendations'][0]['workoutType'], 'cardio')
        self.assertAlmostEqual(sum(m['calories'] for m in data['meals']), data['totalCalories'])

    def test_adjustment_is_applied(self):
        resp = self.client.post('/nutrition/meal-plans',
                                json={'calories': 1800, 'dietaryPreference': 'keto', 'adjustment': -300})
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()['totalCalories'], 1500)

    def test_missing_parameters(self):
        for body in ({'dietaryPreference': 'balanced'}, {'calories': 2000}, {}):
            resp = self.client.post('/nutrition/meal-plans', json=body)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json()['error'], 'Missing required parameters')

    def test_dietary_preferences(self):
        resp = self.client.get('/nutrition/dietary-preferences')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['preferences'],
                         ['balanced', 'high_protein', 'keto', 'vegetarian', 'vegan', 'paleo'])


if __name__ == '__main__':
    unittest.main()
