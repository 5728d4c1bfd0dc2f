import os
import sys
import json
from http.server import BaseHTTPRequestHandler, HTTPServer
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Set up the path for imports
current_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.abspath(os.path.join(current_dir))
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Import the shared request handler
from src.functions.moderation_adapter import requester
from src.functions.moderation_adapter.request_handler import create_request


class AdapterHandler(BaseHTTPRequestHandler):
    def _send_json(self, status_code, payload):
        self.send_response(status_code)
        self.send_header('Content-type', 'application/json')
        self.end_headers()
        self.wfile.write(json.dumps(payload).encode())

    def do_GET(self):
        # Return simple status page for GET requests
        self._send_json(200, {
            "status": "OK",
            "message": "IPFS moderation adapter is running. POST Chainlink job requests to this endpoint.",
            "example": {
                "id": "1",
                "data": {"hash": "QmYourImageHash"}
            }
        })

    def do_POST(self):
        content_length = int(self.headers.get('Content-Length', 0))
        post_data = self.rfile.read(content_length)

        try:
            request_data = json.loads(post_data.decode('utf-8')) if post_data else {}
        except (UnicodeDecodeError, json.JSONDecodeError):
            response = requester.errored(None, "Invalid JSON in request body")
        else:
            response = create_request(request_data)

        self._send_json(response.status_code, response.payload)


def run_server(port=8080):
    server_address = ('', port)
    httpd = HTTPServer(server_address, AdapterHandler)
    print(f"Starting moderation adapter on port {port}...")
    print(f"Adapter is available at: http://localhost:{port}")
    print("\nSample curl command:")
    curl_cmd = f'curl -X POST http://localhost:{port} -H "Content-Type: application/json" -d "{{\\\"id\\\":\\\"1\\\",\\\"data\\\":{{\\\"hash\\\":\\\"QmYourImageHash\\\"}}}}"'
    print(curl_cmd)
    print("\nPress Ctrl+C to stop the server...")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nStopping server...")
        httpd.server_close()
        print("Server stopped.")


if __name__ == "__main__":
    run_server(int(os.environ.get('PORT', 8080)))
