"""
Basic usage - Login and list grades
"""
import asyncio
import os

from mashovpy import MashovClient, LoginRequest


async def main():
    login = LoginRequest(
        username=os.environ["MASHOV_USERNAME"],
        password=os.environ["MASHOV_PASSWORD"],
        semel=int(os.environ["MASHOV_SEMEL"]),
        year=int(os.environ["MASHOV_YEAR"]),
    )

    # Logs in on enter, closes the HTTP session on exit
    async with MashovClient(login) as mashov:
        session = mashov.get_session()
        print(f"Connected as {session['credential']['displayName']}")

        print("\nGrades:")
        for grade in await mashov.get_grades():
            print(f"  {grade.get('subjectName')}: {grade.get('grade')} ({grade.get('gradingEvent')})")

        print("\nGroups:")
        for group in await mashov.get_groups():
            teachers = ", ".join(t["teacherName"] for t in group.get("groupTeachers", []))
            print(f"  {group.get('groupName')} - {teachers}")


if __name__ == "__main__":
    asyncio.run(main())
