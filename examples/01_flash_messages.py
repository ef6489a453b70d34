"""
Flash message example of fastapi-tempdata.

Demonstrates:
- Marking page fields with TempDataProperty
- Post/Redirect/Get with a status message shown exactly once
- Accessing the synchronized subject in endpoints
"""

from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.responses import RedirectResponse

from fastapi_tempdata import RequestContext, TempDataProperty, tempdata_dependency

app = FastAPI(title="Flash Message Example")


class ContactPage:
    """Fields marked with TempDataProperty survive into the next request."""

    status_message: Annotated[str | None, TempDataProperty()] = None


contact_page = tempdata_dependency(ContactPage)


@app.post("/contact")
async def submit_contact(ctx: RequestContext = Depends(contact_page)):
    """Handle the form, then redirect back to the page."""
    ctx.subject.status_message = "Thanks, we will get back to you soon."
    return RedirectResponse("/contact", status_code=303)


@app.get("/contact")
async def show_contact(ctx: RequestContext = Depends(contact_page)):
    """The message is shown once, then it is gone."""
    return {"status_message": ctx.subject.status_message}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with (the first GET issues the session cookie):
    # curl -c jar -b jar http://localhost:8000/contact
    # curl -c jar -b jar -X POST http://localhost:8000/contact
    # curl -c jar -b jar http://localhost:8000/contact
