# users_api/api/home.py

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["home"])

HOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Firestore Users API</title>
    <style>
        body { font-family: Arial, sans-serif; text-align: center; padding: 20px; }
        h1 { color: #2c3e50; }
        .container { max-width: 600px; margin: auto; padding: 20px; border-radius: 10px; background: #f4f4f4; }
        .api-list { text-align: left; margin-top: 20px; }
        a { color: #2980b9; text-decoration: none; font-weight: bold; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Welcome to the Firestore Users API</h1>
        <p>This API stores and retrieves users from Firestore.</p>
        <div class="api-list">
            <h3>Available Endpoints:</h3>
            <ul>
                <li><strong>POST</strong> <a href="/addUser">/addUser</a> - Add a user (use Postman or curl)</li>
                <li><strong>GET</strong> <a href="/listUsers">/listUsers</a> - List all users</li>
                <li><strong>GET</strong> <a href="/getUser?id=yourUserID">/getUser?id=yourUserID</a> - Get user by ID</li>
            </ul>
        </div>
    </div>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def home() -> str:
    return HOME_PAGE
