from motor.motor_asyncio import AsyncIOMotorClient

from config import MONGO_URI, MONGO_DATABASE

# Create async client
client = AsyncIOMotorClient(MONGO_URI)
db = client[MONGO_DATABASE]

# Collections
streams_collection = db["streams"]
courses_collection = db["courses"]
quiz_results_collection = db["quiz_results"]
