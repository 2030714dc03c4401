"""
Upload files to Dropbox
"""
import logging
import os

from dropboxpy import DropboxUploader, DropboxException, setup_logging


def main():
    logging.basicConfig()
    setup_logging(logging.INFO)

    email = os.environ["DROPBOX_EMAIL"]
    password = os.environ["DROPBOX_PASSWORD"]

    with DropboxUploader(email, password) as dropbox:

        # Simple upload to root (logs in on first use)
        dropbox.upload("document.pdf", "/")
        print("Uploaded document.pdf")

        # Upload with progress callback
        def on_progress(progress):
            print(f"Progress: {progress.percentage:.1f}%")

        dropbox.upload("large_file.zip", "/Backups", progress_callback=on_progress)

        # Failures surface as DropboxException subclasses
        try:
            dropbox.upload("report.pdf", "/Shared")
        except DropboxException as e:
            print(f"Upload failed: {e} (status {e.status})")


if __name__ == "__main__":
    main()
