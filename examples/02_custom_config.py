"""
Custom configuration - CA certificates, timeouts
"""
from dropboxpy import DropboxUploader, UploaderConfig


def main():
    # Verify against a local CA directory
    dropbox = DropboxUploader("email@example.com", "MyPassword", "/etc/ssl/certs")
    dropbox.upload("localfile.txt", "/")
    dropbox.close()

    # Full configuration
    config = UploaderConfig.with_ca_path("/etc/ssl/certs", timeout=120.0)
    with DropboxUploader("email@example.com", "MyPassword", config=config) as dropbox:
        dropbox.login()
        print(f"Authenticated: {dropbox.is_authenticated}")
        dropbox.upload("localfile.txt", "/Photos")


if __name__ == "__main__":
    main()
